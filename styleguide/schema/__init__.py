# Copyright (c) 2026 Styleguide
# SPDX-License-Identifier: MIT

"""
Schema definitions for colors and style guide configuration.

All types in this module are immutable (frozen dataclasses).
Generators and config loaders always build new instances.
"""

from styleguide.schema.color import (
    SHADE_NAMES,
    ColorMatch,
    ContrastLevel,
    ContrastResult,
    FunctionalScale,
    HarmonyScheme,
    OKLCHColor,
    RGBColor,
    SemanticPalette,
)
from styleguide.schema.config import (
    AccessibilityConfig,
    ColorDefinition,
    ColorPalette,
    StyleGuideConfig,
    TypographyConfig,
)

__all__ = [
    # Color value types
    "OKLCHColor",
    "RGBColor",
    # Derived results
    "ContrastLevel",
    "ContrastResult",
    "ColorMatch",
    # Generator outputs
    "HarmonyScheme",
    "FunctionalScale",
    "SemanticPalette",
    "SHADE_NAMES",
    # Configuration
    "ColorDefinition",
    "ColorPalette",
    "TypographyConfig",
    "AccessibilityConfig",
    "StyleGuideConfig",
]
