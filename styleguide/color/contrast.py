# Copyright (c) 2026 Styleguide
# SPDX-License-Identifier: MIT

"""
WCAG 2.1 contrast scoring.

Relative luminance uses the WCAG transfer function (threshold 0.03928,
not the 0.04045 of the sRGB standard) and ITU-R BT.709 channel weights.
"""

from __future__ import annotations

import numpy as np

from styleguide.schema.color import ContrastLevel, ContrastResult, RGBColor


# (AA, AAA) minimum ratios
NORMAL_TEXT_THRESHOLDS = (4.5, 7.0)
LARGE_TEXT_THRESHOLDS = (3.0, 4.5)

_LUMINANCE_WEIGHTS = np.array([0.2126, 0.7152, 0.0722], dtype=np.float64)


def get_relative_luminance(color: RGBColor) -> float:
    """
    Relative luminance of an sRGB color, 0.0 (black) to 1.0 (white).
    """
    channels = np.array([color.r, color.g, color.b], dtype=np.float64) / 255.0
    linear = np.where(
        channels <= 0.03928,
        channels / 12.92,
        np.power((channels + 0.055) / 1.055, 2.4),
    )
    return float(np.dot(_LUMINANCE_WEIGHTS, linear))


def get_contrast_ratio(color1: RGBColor, color2: RGBColor) -> float:
    """
    WCAG contrast ratio between two colors.

    Symmetric in its arguments; ranges from 1.0 (identical luminance)
    to 21.0 (black on white).
    """
    lum1 = get_relative_luminance(color1)
    lum2 = get_relative_luminance(color2)
    lighter = max(lum1, lum2)
    darker = min(lum1, lum2)
    return (lighter + 0.05) / (darker + 0.05)


def classify_contrast(ratio: float, is_large_text: bool = False) -> ContrastResult:
    """Grade a contrast ratio against the AA/AAA thresholds."""
    min_aa, min_aaa = LARGE_TEXT_THRESHOLDS if is_large_text else NORMAL_TEXT_THRESHOLDS

    if ratio >= min_aaa:
        level = ContrastLevel.AAA
    elif ratio >= min_aa:
        level = ContrastLevel.AA
    else:
        level = ContrastLevel.FAIL

    return ContrastResult(
        ratio=ratio,
        pass_aa=ratio >= min_aa,
        pass_aaa=ratio >= min_aaa,
        level=level,
    )


def check_contrast(
    foreground: RGBColor,
    background: RGBColor,
    is_large_text: bool = False,
) -> ContrastResult:
    """
    Check a foreground/background pair against WCAG.

    Args:
        foreground: Text color
        background: Surface color
        is_large_text: Use the relaxed thresholds for large text
            (18pt+, or 14pt+ bold)

    Returns:
        ContrastResult with ratio, pass flags and level
    """
    return classify_contrast(get_contrast_ratio(foreground, background), is_large_text)
