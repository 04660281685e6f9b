# Copyright (c) 2026 Styleguide
# SPDX-License-Identifier: MIT

"""
Color value types for the style guide engine.

Design principles:
- Immutable: All types are frozen dataclasses
- Deterministic: Generators return new instances, inputs are never mutated
- Serializable: JSON-ready via to_dict / from_dict (camelCase wire keys)

OKLCH Color Space:
- l (Lightness): 0.0 = black, 1.0 = white
- c (Chroma): 0.0 = gray, ~0.37 = max saturation in sRGB
- h (Hue): 0-360 degrees (≈25=red, ≈80=amber, ≈140=green, ≈250=blue)
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum


SHADE_NAMES = ("50", "100", "200", "300", "400", "500", "600", "700", "800", "900")


# =============================================================================
# Core Color Types
# =============================================================================


@dataclass(frozen=True, slots=True)
class OKLCHColor:
    """
    A single color in OKLCH color space.

    This is the canonical representation for every color the engine
    generates. Hue wraps into [0, 360) on construction; lightness and
    chroma are validated, never clamped.

    Attributes:
        l: Lightness (0.0 = black, 1.0 = white)
        c: Chroma (0.0 = neutral gray, practical max ~0.4)
        h: Hue in degrees [0, 360)
        alpha: Opacity (0.0-1.0)
    """
    l: float
    c: float
    h: float
    alpha: float = 1.0

    def __post_init__(self) -> None:
        """Validate ranges and wrap hue."""
        if not all(math.isfinite(v) for v in (self.l, self.c, self.h, self.alpha)):
            raise ValueError(f"OKLCH components must be finite, got {self.l}, {self.c}, {self.h}")
        if not 0.0 <= self.l <= 1.0:
            raise ValueError(f"Lightness must be 0-1, got {self.l}")
        if self.c < 0.0:
            raise ValueError(f"Chroma must be >= 0, got {self.c}")
        if not 0.0 <= self.alpha <= 1.0:
            raise ValueError(f"Alpha must be 0-1, got {self.alpha}")
        h = self.h % 360.0
        # -1e-17 % 360 == 360.0 in floating point
        if h >= 360.0:
            h = 0.0
        object.__setattr__(self, "h", h)

    @property
    def hex(self) -> str:
        """Hex string like "#3b82f6" (8 digits when translucent)."""
        from styleguide.color.colorspace import oklch_to_hex
        return oklch_to_hex(self)

    @property
    def css(self) -> str:
        """CSS ``oklch()`` function text."""
        from styleguide.color.colorspace import format_oklch
        return format_oklch(self)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"l": self.l, "c": self.c, "h": self.h, "alpha": self.alpha}

    @classmethod
    def from_dict(cls, data: dict) -> OKLCHColor:
        """Deserialize from dictionary."""
        return cls(
            l=float(data["l"]),
            c=float(data["c"]),
            h=float(data["h"]),
            alpha=float(data.get("alpha", 1.0)),
        )


@dataclass(frozen=True, slots=True)
class RGBColor:
    """
    An 8-bit sRGB color.

    Produced by conversion from OKLCH or parsed from hex/JSON input.

    Attributes:
        r, g, b: Channel values (integers 0-255)
        alpha: Opacity (0.0-1.0)
    """
    r: int
    g: int
    b: int
    alpha: float = 1.0

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"Channel {name} must be 0-255, got {value}")
        if not 0.0 <= self.alpha <= 1.0:
            raise ValueError(f"Alpha must be 0-1, got {self.alpha}")

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"r": self.r, "g": self.g, "b": self.b, "alpha": self.alpha}

    @classmethod
    def from_dict(cls, data: dict) -> RGBColor:
        """Deserialize from dictionary, rounding fractional channels."""
        return cls(
            r=int(round(float(data["r"]))),
            g=int(round(float(data["g"]))),
            b=int(round(float(data["b"]))),
            alpha=float(data.get("alpha", 1.0)),
        )


# =============================================================================
# Derived Results
# =============================================================================


class ContrastLevel(Enum):
    """WCAG conformance level reached by a color pair."""

    FAIL = "fail"
    AA = "AA"
    AAA = "AAA"


@dataclass(frozen=True, slots=True)
class ContrastResult:
    """
    WCAG contrast check outcome.

    Attributes:
        ratio: Contrast ratio (>= 1.0)
        pass_aa: Ratio meets the AA threshold
        pass_aaa: Ratio meets the AAA threshold
        level: Highest level reached
    """
    ratio: float
    pass_aa: bool
    pass_aaa: bool
    level: ContrastLevel

    def to_dict(self) -> dict:
        return {
            "ratio": self.ratio,
            "passAA": self.pass_aa,
            "passAAA": self.pass_aaa,
            "level": self.level.value,
        }


@dataclass(frozen=True, slots=True)
class ColorMatch:
    """Nearest named color for a query color."""
    name: str
    distance: float
    hex: str

    def to_dict(self) -> dict:
        return {"name": self.name, "distance": self.distance, "hex": self.hex}


# =============================================================================
# Generator Outputs
# =============================================================================


@dataclass(frozen=True, slots=True)
class HarmonyScheme:
    """A named set of hues related by fixed angles on the hue wheel."""
    name: str
    colors: tuple[OKLCHColor, ...]
    description: str

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "description": self.description,
            "colors": [c.to_dict() for c in self.colors],
        }


@dataclass(frozen=True, slots=True)
class FunctionalScale:
    """A tonal scale produced by lightness/chroma/hue curves."""
    name: str
    colors: tuple[OKLCHColor, ...]

    def to_dict(self) -> dict:
        return {"name": self.name, "colors": [c.to_dict() for c in self.colors]}


@dataclass(frozen=True, slots=True)
class SemanticPalette:
    """
    Five tonal ramps derived from one base color.

    Each ramp holds ten shades ordered 50 (lightest) to 900 (darkest),
    matching SHADE_NAMES.
    """
    primary: tuple[OKLCHColor, ...]
    neutral: tuple[OKLCHColor, ...]
    success: tuple[OKLCHColor, ...]
    warning: tuple[OKLCHColor, ...]
    error: tuple[OKLCHColor, ...]

    def families(self) -> list[tuple[str, tuple[OKLCHColor, ...]]]:
        """Ramps in display order, keyed by family name."""
        return [
            ("primary", self.primary),
            ("neutral", self.neutral),
            ("success", self.success),
            ("warning", self.warning),
            ("error", self.error),
        ]

    def shades(self) -> list[tuple[str, OKLCHColor]]:
        """Flatten to ``(family-shade, color)`` pairs, e.g. ``primary-500``."""
        return [
            (f"{family}-{shade}", color)
            for family, ramp in self.families()
            for shade, color in zip(SHADE_NAMES, ramp)
        ]

    def to_dict(self) -> dict:
        return {
            family: [c.to_dict() for c in ramp]
            for family, ramp in self.families()
        }
