# Copyright (c) 2026 Styleguide
# SPDX-License-Identifier: MIT

"""
Color engine for the style guide.

Pure, deterministic functions over immutable color values: conversion,
contrast scoring, named-color matching and palette generation.
"""

from styleguide.color.colorspace import (
    format_oklch,
    hex_to_oklch,
    hex_to_rgb,
    oklch_to_hex,
    oklch_to_rgb,
    oklch_to_srgb,
    rgb_to_hex,
    rgb_to_oklch,
    srgb_to_oklch,
)
from styleguide.color.contrast import (
    check_contrast,
    classify_contrast,
    get_contrast_ratio,
    get_relative_luminance,
)
from styleguide.color.harmony import (
    SchemeType,
    generate_classical_harmony,
    generate_color_scheme,
    generate_perceptually_balanced,
)
from styleguide.color.matching import color_distance, find_nearest_color, hue_difference
from styleguide.color.named import CSS_COLORS
from styleguide.color.scales import generate_functional_scale, generate_palette_from_base

__all__ = [
    # Conversion
    "oklch_to_rgb",
    "rgb_to_oklch",
    "rgb_to_hex",
    "hex_to_rgb",
    "oklch_to_hex",
    "hex_to_oklch",
    "format_oklch",
    # Array pipeline, shape (..., 3)
    "srgb_to_oklch",
    "oklch_to_srgb",
    # Contrast
    "get_relative_luminance",
    "get_contrast_ratio",
    "classify_contrast",
    "check_contrast",
    # Matching
    "CSS_COLORS",
    "hue_difference",
    "color_distance",
    "find_nearest_color",
    # Generators
    "SchemeType",
    "generate_color_scheme",
    "generate_classical_harmony",
    "generate_perceptually_balanced",
    "generate_functional_scale",
    "generate_palette_from_base",
]
