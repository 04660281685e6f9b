# Copyright (c) 2026 Styleguide
# SPDX-License-Identifier: MIT

"""
Tonal scales: the functional scale and the semantic shade palette.

The functional scale is computed from curves. The semantic palette is
mostly hand-tuned tables: only the primary ramp follows the base color, the
neutral ramp borrows its hue, and success/warning/error are fixed.
"""

from __future__ import annotations

from dataclasses import replace

from styleguide.schema.color import FunctionalScale, OKLCHColor, SemanticPalette


# =============================================================================
# Functional Scale
# =============================================================================

# Hue ranges (inclusive, degrees) that receive a Bezold–Brücke correction
WARM_HUES = (30.0, 90.0)
COOL_HUES = (180.0, 270.0)
MAX_HUE_SHIFT = 10.0


def _hue_shift(hue: float, n: float) -> float:
    """
    Hue correction at scale position n (0 = lightest).

    Warm hues drift toward red and cool hues toward blue. Hues outside both
    ranges are left alone.
    """
    if WARM_HUES[0] <= hue <= WARM_HUES[1]:
        return -(1.0 - n) * MAX_HUE_SHIFT
    if COOL_HUES[0] <= hue <= COOL_HUES[1]:
        return (1.0 - n) * MAX_HUE_SHIFT
    return 0.0


def generate_functional_scale(base: OKLCHColor, steps: int = 11) -> FunctionalScale:
    """
    Generate a light-to-dark scale from lightness, chroma and hue functions.

    For step i, with n = i / (steps - 1):
    - L(n) = 1 - 0.85n, clamped to [0.05, 0.98] (never pure white/black)
    - C(n) = base.c * max(0.2, 4n(1 - n)), clamped to [0, 0.5]; saturation
      peaks mid-scale and keeps 20% at the ends
    - H(n) = base.h + shift, see _hue_shift

    Args:
        base: Source of chroma, hue and alpha
        steps: Number of colors (a single step sits at n = 0)

    Returns:
        FunctionalScale named "Functional Scale"
    """
    colors = []
    for i in range(max(steps, 0)):
        n = i / (steps - 1) if steps > 1 else 0.0

        lightness = 1.0 - n * 0.85
        chroma = base.c * max(0.2, 4.0 * n * (1.0 - n))
        hue = (base.h + _hue_shift(base.h, n) + 360.0) % 360.0

        colors.append(OKLCHColor(
            l=max(0.05, min(0.98, lightness)),
            c=max(0.0, min(0.5, chroma)),
            h=hue,
            alpha=base.alpha,
        ))

    return FunctionalScale(name="Functional Scale", colors=tuple(colors))


# =============================================================================
# Semantic Palette (50 … 900)
# =============================================================================

# Primary 50-400: (lightness, chroma multiplier, chroma cap or None)
_PRIMARY_TINTS = (
    (0.95, 0.1, 0.02),
    (0.90, 0.2, 0.04),
    (0.80, 0.4, None),
    (0.70, 0.6, None),
    (0.60, 0.8, None),
)

# Primary 600-900: (lightness floor, lightness drop, chroma multiplier)
_PRIMARY_SHADES = (
    (0.35, 0.15, 0.90),
    (0.30, 0.25, 0.85),
    (0.20, 0.35, 0.70),
    (0.15, 0.45, 0.60),
)

# Neutral: (lightness, chroma); hue comes from the base color
NEUTRAL_RAMP = (
    (0.98, 0.005),
    (0.96, 0.008),
    (0.92, 0.010),
    (0.85, 0.012),
    (0.70, 0.015),
    (0.55, 0.018),
    (0.45, 0.020),
    (0.35, 0.022),
    (0.25, 0.025),
    (0.15, 0.028),
)

SUCCESS_HUE = 140.0
SUCCESS_RAMP = (
    (0.95, 0.02),
    (0.90, 0.04),
    (0.80, 0.08),
    (0.70, 0.11),
    (0.60, 0.13),
    (0.55, 0.15),
    (0.45, 0.14),
    (0.35, 0.13),
    (0.28, 0.11),
    (0.20, 0.09),
)

WARNING_HUE = 80.0
WARNING_RAMP = (
    (0.95, 0.03),
    (0.90, 0.06),
    (0.80, 0.10),
    (0.75, 0.14),
    (0.70, 0.16),
    (0.65, 0.18),
    (0.55, 0.17),
    (0.45, 0.16),
    (0.35, 0.14),
    (0.25, 0.11),
)

ERROR_HUE = 25.0
ERROR_RAMP = (
    (0.95, 0.03),
    (0.90, 0.06),
    (0.80, 0.12),
    (0.70, 0.17),
    (0.60, 0.20),
    (0.55, 0.22),
    (0.45, 0.21),
    (0.38, 0.20),
    (0.30, 0.17),
    (0.22, 0.14),
)


def _primary_ramp(base: OKLCHColor) -> tuple[OKLCHColor, ...]:
    tints = [
        replace(base, l=l, c=base.c * mult if cap is None else min(cap, base.c * mult))
        for l, mult, cap in _PRIMARY_TINTS
    ]
    shades = [
        replace(base, l=max(floor, base.l - drop), c=base.c * mult)
        for floor, drop, mult in _PRIMARY_SHADES
    ]
    return (*tints, base, *shades)


def _fixed_ramp(hue: float, table: tuple[tuple[float, float], ...]) -> tuple[OKLCHColor, ...]:
    return tuple(OKLCHColor(l=l, c=c, h=hue) for l, c in table)


def generate_palette_from_base(base: OKLCHColor) -> SemanticPalette:
    """
    Build primary, neutral, success, warning and error ramps.

    The base color becomes primary-500 unchanged (same object). Lighter
    primary shades use fixed lightness targets; darker ones step down from
    the base lightness with a floor. Every other ramp comes from a fixed
    table, the neutral one rotated to the base hue.

    Args:
        base: Brand color

    Returns:
        SemanticPalette with five 10-shade ramps (50 … 900)
    """
    return SemanticPalette(
        primary=_primary_ramp(base),
        neutral=_fixed_ramp(base.h, NEUTRAL_RAMP),
        success=_fixed_ramp(SUCCESS_HUE, SUCCESS_RAMP),
        warning=_fixed_ramp(WARNING_HUE, WARNING_RAMP),
        error=_fixed_ramp(ERROR_HUE, ERROR_RAMP),
    )
