# Copyright (c) 2026 Styleguide
# SPDX-License-Identifier: MIT

"""
Color space conversions.

Conversion chain: sRGB ↔ Linear RGB ↔ LMS ↔ OKLab ↔ OKLCH

References:
- OKLab: https://bottosson.github.io/posts/oklab/
- OKLCH: Cylindrical form of OKLab (Lightness, Chroma, Hue)

The array functions accept shape (..., 3) and are pure NumPy. The value-type
wrappers (oklch_to_rgb, rgb_to_oklch, hex helpers) build on them for single
colors.
"""

from __future__ import annotations

import re

import numpy as np
from numpy.typing import NDArray

from styleguide.schema.color import OKLCHColor, RGBColor


# =============================================================================
# Transfer functions
# =============================================================================

# sRGB piecewise curve: linear segment below the knee, 2.4 power above
_DECODE_KNEE = 0.04045
_ENCODE_KNEE = 0.0031308


def srgb_to_linear(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """Gamma-decode sRGB components in [0, 1] to linear light."""
    v = np.asarray(srgb, dtype=np.float64)
    return np.where(v <= _DECODE_KNEE, v / 12.92, ((v + 0.055) / 1.055) ** 2.4)


def linear_to_srgb(linear: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Gamma-encode linear light to sRGB components.

    Negative input is floored at 0 before the power law and the result is
    clipped to [0, 1], so out-of-gamut colors clip per channel.
    """
    v = np.maximum(np.asarray(linear, dtype=np.float64), 0.0)
    encoded = np.where(v <= _ENCODE_KNEE, v * 12.92, 1.055 * v ** (1.0 / 2.4) - 0.055)
    return np.clip(encoded, 0.0, 1.0)


# =============================================================================
# OKLab matrices
# =============================================================================

# Published at https://bottosson.github.io/posts/oklab/, inverses included.
# Rows map an input triple to one output component.

_RGB_TO_LMS = np.array([
    [0.4122214708, 0.5363325363, 0.0514459929],
    [0.2119034982, 0.6806995451, 0.1073969566],
    [0.0883024619, 0.2817188376, 0.6299787005],
], dtype=np.float64)

_LMS_TO_LAB = np.array([
    [0.2104542553, 0.7936177850, -0.0040720468],
    [1.9779984951, -2.4285922050, 0.4505937099],
    [0.0259040371, 0.7827717662, -0.8086757660],
], dtype=np.float64)

_LAB_TO_LMS = np.array([
    [1.0, 0.3963377774, 0.2158037573],
    [1.0, -0.1055613458, -0.0638541728],
    [1.0, -0.0894841775, -1.2914855480],
], dtype=np.float64)

_LMS_TO_RGB = np.array([
    [4.0767416621, -3.3077115913, 0.2309699292],
    [-1.2684380046, 2.6097574011, -0.3413193965],
    [-0.0041960863, -0.7034186147, 1.7076147010],
], dtype=np.float64)


def _transform(triples: NDArray[np.float64], matrix: NDArray[np.float64]) -> NDArray[np.float64]:
    """Apply a 3x3 matrix to the last axis of a (..., 3) array."""
    return np.asarray(triples, dtype=np.float64) @ matrix.T


def linear_rgb_to_oklab(rgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """Linear sRGB (..., 3) to OKLab (L, a, b)."""
    # cbrt keeps the sign of out-of-gamut cone responses
    return _transform(np.cbrt(_transform(rgb, _RGB_TO_LMS)), _LMS_TO_LAB)


def oklab_to_linear_rgb(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """OKLab (..., 3) to linear sRGB; components may leave [0, 1]."""
    return _transform(_transform(lab, _LAB_TO_LMS) ** 3, _LMS_TO_RGB)


# =============================================================================
# Cartesian ↔ polar
# =============================================================================


def oklab_to_oklch(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    OKLab (L, a, b) to OKLCH (L, C, H).

    C is the length of (a, b); H is its angle in degrees, in [0, 360).
    """
    lab = np.asarray(lab, dtype=np.float64)
    a, b = lab[..., 1], lab[..., 2]
    hue = np.degrees(np.arctan2(b, a)) % 360.0
    # -1e-20 % 360.0 == 360.0
    hue = np.where(hue >= 360.0, 0.0, hue)
    return np.stack([lab[..., 0], np.hypot(a, b), hue], axis=-1)


def oklch_to_oklab(lch: NDArray[np.float64]) -> NDArray[np.float64]:
    """OKLCH (L, C, H in degrees) to OKLab (L, a, b)."""
    lch = np.asarray(lch, dtype=np.float64)
    chroma, angle = lch[..., 1], np.radians(lch[..., 2])
    return np.stack([lch[..., 0], chroma * np.cos(angle), chroma * np.sin(angle)], axis=-1)


# =============================================================================
# Full chain
# =============================================================================


def srgb_to_oklch(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """Gamma-encoded sRGB in [0, 1] to OKLCH, for any (..., 3) batch."""
    return oklab_to_oklch(linear_rgb_to_oklab(srgb_to_linear(srgb)))


def oklch_to_srgb(lch: NDArray[np.float64]) -> NDArray[np.float64]:
    """OKLCH (..., 3) to sRGB in [0, 1], clipping out-of-gamut channels."""
    return linear_to_srgb(oklab_to_linear_rgb(oklch_to_oklab(lch)))


# =============================================================================
# Value types: OKLCHColor ↔ RGBColor
# =============================================================================


def oklch_to_rgb(color: OKLCHColor) -> RGBColor:
    """
    Convert an OKLCH color to 8-bit sRGB.

    Channels are scaled to 0-255, rounded half up and clamped.
    Alpha passes through unchanged.
    """
    srgb = oklch_to_srgb(np.array([color.l, color.c, color.h], dtype=np.float64))
    r, g, b = np.clip(np.floor(srgb * 255.0 + 0.5), 0, 255).astype(int)
    return RGBColor(r=int(r), g=int(g), b=int(b), alpha=color.alpha)


def rgb_to_oklch(color: RGBColor) -> OKLCHColor:
    """
    Convert 8-bit sRGB to OKLCH.

    Exact inverse pipeline of oklch_to_rgb (before quantization).
    Lightness is clamped to [0, 1] to absorb float error at white.
    """
    srgb = np.array([color.r, color.g, color.b], dtype=np.float64) / 255.0
    L, C, H = srgb_to_oklch(srgb)
    return OKLCHColor(
        l=min(1.0, max(0.0, float(L))),
        c=float(C),
        h=float(H),
        alpha=color.alpha,
    )


# =============================================================================
# Hex / CSS text
# =============================================================================

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")


def rgb_to_hex(color: RGBColor) -> str:
    """
    Format as lowercase hex.

    Returns "#rrggbb", or "#rrggbbaa" when alpha < 1.
    """
    hex_str = f"#{color.r:02x}{color.g:02x}{color.b:02x}"
    if color.alpha < 1.0:
        hex_str += f"{int(np.floor(color.alpha * 255.0 + 0.5)):02x}"
    return hex_str


def hex_to_rgb(hex_color: str) -> RGBColor:
    """
    Parse a hex color string.

    Args:
        hex_color: "#rrggbb", "rrggbb", "#rrggbbaa" or "rrggbbaa" (any case)

    Returns:
        RGBColor; alpha is byte/255 for 8-digit input, otherwise 1.0

    Raises:
        ValueError: If the string is not 6 or 8 hex digits
    """
    m = _HEX_RE.match(hex_color.strip())
    if not m:
        raise ValueError(f"Invalid hex color: {hex_color!r}")
    digits = m.group(1)

    r = int(digits[0:2], 16)
    g = int(digits[2:4], 16)
    b = int(digits[4:6], 16)
    alpha = int(digits[6:8], 16) / 255.0 if len(digits) == 8 else 1.0

    return RGBColor(r=r, g=g, b=b, alpha=alpha)


def oklch_to_hex(color: OKLCHColor) -> str:
    """Convert OKLCH to hex, e.g. "#3b82f6"."""
    return rgb_to_hex(oklch_to_rgb(color))


def hex_to_oklch(hex_color: str) -> OKLCHColor:
    """Convert a hex string to OKLCH."""
    return rgb_to_oklch(hex_to_rgb(hex_color))


def format_oklch(color: OKLCHColor) -> str:
    """
    Format as a CSS oklch() function.

    Example: ``oklch(55.00% 0.2000 250.00)``, or
    ``oklch(55.00% 0.2000 250.00 / 0.50)`` when translucent.
    """
    body = f"{color.l * 100:.2f}% {color.c:.4f} {color.h:.2f}"
    if color.alpha < 1.0:
        body += f" / {color.alpha:.2f}"
    return f"oklch({body})"
