# Copyright (c) 2026 Styleguide
# SPDX-License-Identifier: MIT

"""
Nearest named-color search in OKLCH space.

Distance is Euclidean over (ΔL, ΔC, ΔH_eff) where the hue term is turned
into a linear quantity: the circular hue difference as a fraction of a full
turn, scaled by the chroma of the FIRST color. The metric is therefore not
symmetric: color_distance(a, b) != color_distance(b, a) when a.c != b.c.
"""

from __future__ import annotations

import math
from typing import Mapping, Optional

from styleguide.color.colorspace import oklch_to_hex
from styleguide.color.named import CSS_COLORS
from styleguide.schema.color import ColorMatch, OKLCHColor


def hue_difference(h1: float, h2: float) -> float:
    """Wraparound-aware hue difference in degrees, 0-180."""
    dh = abs(h1 - h2) % 360.0
    return 360.0 - dh if dh > 180.0 else dh


def color_distance(color1: OKLCHColor, color2: OKLCHColor) -> float:
    """
    Perceptual distance between two OKLCH colors.

    Args:
        color1: Query color; its chroma weights the hue term
        color2: Candidate color

    Returns:
        Distance >= 0 (0 for identical colors)
    """
    dl = color1.l - color2.l
    dc = color1.c - color2.c
    dh = hue_difference(color1.h, color2.h) / 360.0 * color1.c
    return math.sqrt(dl * dl + dc * dc + dh * dh)


def find_nearest_color(
    target: OKLCHColor,
    palette: Mapping[str, OKLCHColor] = CSS_COLORS,
) -> Optional[ColorMatch]:
    """
    Find the palette entry closest to ``target``.

    Linear scan in palette order; on exact ties the first entry wins.

    Args:
        target: Query color
        palette: Ordered name → color mapping (defaults to CSS named colors)

    Returns:
        ColorMatch for the closest entry, or None if the palette is empty
    """
    nearest: Optional[tuple[str, OKLCHColor]] = None
    min_distance = math.inf

    for name, color in palette.items():
        distance = color_distance(target, color)
        if distance < min_distance:
            min_distance = distance
            nearest = (name, color)

    if nearest is None:
        return None

    name, color = nearest
    return ColorMatch(name=name, distance=min_distance, hex=oklch_to_hex(color))
