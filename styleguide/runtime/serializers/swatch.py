# Copyright (c) 2026 Styleguide
# SPDX-License-Identifier: MIT

"""
Swatch serializer: a color definition annotated for display.

Each swatch carries every representation of the color plus the
accessibility and naming metadata a style guide card shows: the nearest
CSS color name and the contrast of the color against white and black.
The better of the two picks the label text color.
"""

from __future__ import annotations

from styleguide.color.colorspace import format_oklch, oklch_to_hex, oklch_to_rgb
from styleguide.color.contrast import check_contrast
from styleguide.color.matching import find_nearest_color
from styleguide.schema.color import RGBColor
from styleguide.schema.config import ColorDefinition, StyleGuideConfig

WHITE = RGBColor(r=255, g=255, b=255)
BLACK = RGBColor(r=0, g=0, b=0)


def to_swatch(definition: ColorDefinition) -> dict:
    """
    Annotate one color definition.

    Returns:
        Dict with name, description, usage, oklch, css, hex, rgb, match,
        contrast (``onWhite`` / ``onBlack``) and textColor.
    """
    rgb = oklch_to_rgb(definition.oklch)
    match = find_nearest_color(definition.oklch)
    on_white = check_contrast(rgb, WHITE)
    on_black = check_contrast(rgb, BLACK)

    return {
        "name": definition.name,
        "description": definition.description,
        "usage": definition.usage,
        "oklch": definition.oklch.to_dict(),
        "css": format_oklch(definition.oklch),
        "hex": oklch_to_hex(definition.oklch),
        "rgb": rgb.to_dict(),
        "match": match.to_dict() if match is not None else None,
        "contrast": {
            "onWhite": on_white.to_dict(),
            "onBlack": on_black.to_dict(),
        },
        "textColor": "#fff" if on_white.ratio > on_black.ratio else "#000",
    }


def to_swatches(config: StyleGuideConfig) -> list[dict]:
    """Swatches for every palette, grouped as ``{name, colors}``."""
    return [
        {"name": palette.name, "colors": [to_swatch(c) for c in palette.colors]}
        for palette in config.palettes
    ]
