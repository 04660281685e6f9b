# Copyright (c) 2026 Styleguide
# SPDX-License-Identifier: MIT

"""
Style guide configuration schema.

A StyleGuideConfig is the whole document the service renders: named color
palettes, typography, spacing and accessibility thresholds. Like the color
types it is immutable; changing the configuration means building a new one.

Wire form uses the camelCase keys of the JSON API (fontFamily, lineHeight,
minContrastNormal, ...).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from styleguide.schema.color import OKLCHColor


@dataclass(frozen=True, slots=True)
class ColorDefinition:
    """
    A named color with optional documentation.

    Attributes:
        name: Token name, e.g. "primary-500"
        oklch: The color value
        description: What the color is
        usage: Where the color should be used
    """
    name: str
    oklch: OKLCHColor
    description: Optional[str] = None
    usage: Optional[str] = None

    def __post_init__(self) -> None:
        if not isinstance(self.name, str):
            raise ValueError(f"Color name must be a string, got {type(self.name).__name__}")
        if not self.name:
            raise ValueError("Color name cannot be empty")
        for attr in ("description", "usage"):
            value = getattr(self, attr)
            if value is not None and not isinstance(value, str):
                raise ValueError(f"Color {attr} must be a string, got {type(value).__name__}")

    def to_dict(self) -> dict:
        d = {"name": self.name, "oklch": self.oklch.to_dict()}
        if self.description is not None:
            d["description"] = self.description
        if self.usage is not None:
            d["usage"] = self.usage
        return d

    @classmethod
    def from_dict(cls, data: dict) -> ColorDefinition:
        return cls(
            name=data["name"],
            oklch=OKLCHColor.from_dict(data["oklch"]),
            description=data.get("description"),
            usage=data.get("usage"),
        )


@dataclass(frozen=True, slots=True)
class ColorPalette:
    """A titled group of color definitions."""
    name: str
    colors: tuple[ColorDefinition, ...]

    def __post_init__(self) -> None:
        if not isinstance(self.name, str):
            raise ValueError(f"Palette name must be a string, got {type(self.name).__name__}")

    def to_dict(self) -> dict:
        return {"name": self.name, "colors": [c.to_dict() for c in self.colors]}

    @classmethod
    def from_dict(cls, data: dict) -> ColorPalette:
        return cls(
            name=data["name"],
            colors=tuple(ColorDefinition.from_dict(c) for c in data.get("colors", [])),
        )


@dataclass(frozen=True, slots=True)
class TypographyConfig:
    """
    Font stacks and type scale.

    Attributes:
        font_family: heading / body / mono font stacks
        scale: h1-h6, body and small font sizes (CSS lengths)
        line_height: tight / normal / relaxed multipliers
        font_weight: light / normal / medium / semibold / bold
    """
    font_family: dict[str, str]
    scale: dict[str, str]
    line_height: dict[str, float]
    font_weight: dict[str, int]

    def to_dict(self) -> dict:
        return {
            "fontFamily": dict(self.font_family),
            "scale": dict(self.scale),
            "lineHeight": dict(self.line_height),
            "fontWeight": dict(self.font_weight),
        }

    @classmethod
    def from_dict(cls, data: dict) -> TypographyConfig:
        return cls(
            font_family={k: str(v) for k, v in data["fontFamily"].items()},
            scale={k: str(v) for k, v in data["scale"].items()},
            line_height={k: float(v) for k, v in data["lineHeight"].items()},
            font_weight={k: int(v) for k, v in data["fontWeight"].items()},
        )


@dataclass(frozen=True, slots=True)
class AccessibilityConfig:
    """WCAG-derived guardrails the style guide documents."""
    min_contrast_normal: float
    min_contrast_large: float
    min_contrast_aaa: float
    min_font_size: str
    max_line_length: int

    def to_dict(self) -> dict:
        return {
            "minContrastNormal": self.min_contrast_normal,
            "minContrastLarge": self.min_contrast_large,
            "minContrastAAA": self.min_contrast_aaa,
            "minFontSize": self.min_font_size,
            "maxLineLength": self.max_line_length,
        }

    @classmethod
    def from_dict(cls, data: dict) -> AccessibilityConfig:
        return cls(
            min_contrast_normal=float(data["minContrastNormal"]),
            min_contrast_large=float(data["minContrastLarge"]),
            min_contrast_aaa=float(data["minContrastAAA"]),
            min_font_size=str(data["minFontSize"]),
            max_line_length=int(data["maxLineLength"]),
        )


@dataclass(frozen=True, slots=True)
class StyleGuideConfig:
    """
    Complete style guide configuration.

    Attributes:
        title: Page title
        description: Lead paragraph (optional)
        palettes: Color palettes in display order
        typography: Fonts and type scale
        spacing: Spacing tokens (xs ... 4xl) to CSS lengths
        accessibility: Contrast and readability thresholds
    """
    title: str
    palettes: tuple[ColorPalette, ...]
    typography: TypographyConfig
    spacing: dict[str, str]
    accessibility: AccessibilityConfig
    description: Optional[str] = None

    def __post_init__(self) -> None:
        if not isinstance(self.title, str):
            raise ValueError(f"Title must be a string, got {type(self.title).__name__}")

    def to_dict(self) -> dict:
        d = {"title": self.title}
        if self.description is not None:
            d["description"] = self.description
        d["palettes"] = [p.to_dict() for p in self.palettes]
        d["typography"] = self.typography.to_dict()
        d["spacing"] = dict(self.spacing)
        d["accessibility"] = self.accessibility.to_dict()
        return d

    @classmethod
    def from_dict(cls, data: dict) -> StyleGuideConfig:
        return cls(
            title=data["title"],
            description=data.get("description"),
            palettes=tuple(ColorPalette.from_dict(p) for p in data["palettes"]),
            typography=TypographyConfig.from_dict(data["typography"]),
            spacing={k: str(v) for k, v in data["spacing"].items()},
            accessibility=AccessibilityConfig.from_dict(data["accessibility"]),
        )
