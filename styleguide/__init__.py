# Copyright (c) 2026 Styleguide
# SPDX-License-Identifier: MIT

"""
Styleguide -- OKLCH design-system style guide engine.

Holds a style guide configuration (colors, typography, spacing,
accessibility rules), renders it to CSS, and answers color questions:
conversion, WCAG contrast, nearest named color and palette generation.

Quick start::

    from styleguide import OKLCHColor, generate_palette_from_base, oklch_to_hex

    base = OKLCHColor(l=0.55, c=0.2, h=250)
    palette = generate_palette_from_base(base)
    [oklch_to_hex(c) for c in palette.primary]
"""

from __future__ import annotations

__version__ = "1.0.0"

from styleguide.color import (
    CSS_COLORS,
    check_contrast,
    find_nearest_color,
    format_oklch,
    generate_classical_harmony,
    generate_color_scheme,
    generate_functional_scale,
    generate_palette_from_base,
    generate_perceptually_balanced,
    hex_to_rgb,
    oklch_to_hex,
    oklch_to_rgb,
    rgb_to_hex,
    rgb_to_oklch,
)
from styleguide.config import ConfigStore, load_config
from styleguide.runtime import create_app
from styleguide.schema import (
    ColorMatch,
    ContrastResult,
    OKLCHColor,
    RGBColor,
    StyleGuideConfig,
)

__all__ = [
    # Types
    "OKLCHColor",
    "RGBColor",
    "ContrastResult",
    "ColorMatch",
    "StyleGuideConfig",
    # Conversion
    "oklch_to_rgb",
    "rgb_to_oklch",
    "oklch_to_hex",
    "rgb_to_hex",
    "hex_to_rgb",
    "format_oklch",
    # Analysis
    "check_contrast",
    "find_nearest_color",
    "CSS_COLORS",
    # Generators
    "generate_color_scheme",
    "generate_classical_harmony",
    "generate_perceptually_balanced",
    "generate_functional_scale",
    "generate_palette_from_base",
    # Service
    "ConfigStore",
    "load_config",
    "create_app",
    # Version
    "__version__",
]
