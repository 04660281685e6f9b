# Copyright (c) 2026 Styleguide
# SPDX-License-Identifier: MIT

"""
Hue-wheel color schemes.

Three generators, all rotating hue at constant lightness and chroma
(except monochromatic, which varies lightness only):
1. generate_color_scheme: the four quick schemes used by the palette picker
2. generate_classical_harmony: named schemes with descriptions
3. generate_perceptually_balanced: N evenly spaced hues of equal visual weight

Because OKLCH is perceptually uniform, equal l and c give colors of equal
perceived lightness and saturation regardless of hue.
"""

from __future__ import annotations

from dataclasses import replace
from enum import Enum
from typing import Union

from styleguide.schema.color import HarmonyScheme, OKLCHColor


class SchemeType(Enum):
    """Quick scheme kinds for generate_color_scheme."""

    MONOCHROMATIC = "monochromatic"
    ANALOGOUS = "analogous"
    COMPLEMENTARY = "complementary"
    TRIADIC = "triadic"


def _rotate(color: OKLCHColor, degrees: float) -> OKLCHColor:
    return replace(color, h=(color.h + degrees) % 360.0)


def _with_lightness(color: OKLCHColor, l: float) -> OKLCHColor:
    return replace(color, l=min(1.0, max(0.0, l)))


def generate_color_scheme(
    base: OKLCHColor,
    kind: Union[SchemeType, str],
) -> list[OKLCHColor]:
    """
    Build a simple scheme around a base color.

    Args:
        base: Base color, always returned first
        kind: SchemeType or its string value

    Returns:
        ``[base, *variants]``:
        - monochromatic: l +0.15, -0.15, +0.30, -0.30 (clamped to [0, 1])
        - analogous: h +30, -30
        - complementary: h +180
        - triadic: h +120, +240

    Raises:
        ValueError: Unknown scheme kind
    """
    kind = SchemeType(kind)
    colors = [base]

    if kind is SchemeType.MONOCHROMATIC:
        colors.extend(
            _with_lightness(base, base.l + offset)
            for offset in (0.15, -0.15, 0.3, -0.3)
        )
    elif kind is SchemeType.ANALOGOUS:
        colors.extend([_rotate(base, 30), _rotate(base, -30)])
    elif kind is SchemeType.COMPLEMENTARY:
        colors.append(_rotate(base, 180))
    elif kind is SchemeType.TRIADIC:
        colors.extend([_rotate(base, 120), _rotate(base, 240)])

    return colors


def generate_classical_harmony(base: OKLCHColor) -> list[HarmonyScheme]:
    """
    The four classical harmonies of a base color.

    Returns Complementary, Analogous, Triadic and Tetradic, in that order.
    """
    return [
        HarmonyScheme(
            name="Complementary",
            description="Two colors opposite each other (180° apart)",
            colors=(base, _rotate(base, 180)),
        ),
        HarmonyScheme(
            name="Analogous",
            description="Colors adjacent to each other (30° and 330°)",
            colors=(_rotate(base, -30), base, _rotate(base, 30)),
        ),
        HarmonyScheme(
            name="Triadic",
            description="Three colors equally spaced (120° apart)",
            colors=(base, _rotate(base, 120), _rotate(base, 240)),
        ),
        HarmonyScheme(
            name="Tetradic",
            description="Four colors in two complementary pairs",
            colors=(base, _rotate(base, 60), _rotate(base, 180), _rotate(base, 240)),
        ),
    ]


def generate_perceptually_balanced(base: OKLCHColor, count: int = 6) -> list[OKLCHColor]:
    """
    Evenly spaced hues at the base color's lightness and chroma.

    Args:
        base: Supplies l, c, alpha and the starting hue
        count: Number of colors; 0 or less yields an empty list

    Returns:
        ``count`` colors with hues ``base.h + i * 360 / count``
    """
    if count <= 0:
        return []

    step = 360.0 / count
    return [
        OKLCHColor(l=base.l, c=base.c, h=(base.h + i * step) % 360.0, alpha=base.alpha)
        for i in range(count)
    ]
