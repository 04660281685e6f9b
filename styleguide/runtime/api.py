# Copyright (c) 2026 Styleguide
# SPDX-License-Identifier: MIT

"""
Request handlers for the style guide service.

Handlers take validated request models (or plain config dicts) and return
JSON-ready values. Color handlers are pure; config handlers read and write
the ConfigStore they are given. Caller mistakes that survive model
validation raise RequestError (or ConfigError); the routes in
styleguide.runtime.routes turn them into 400 responses.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime, timezone
from typing import Optional

from pydantic import ValidationError

from styleguide.color.colorspace import hex_to_rgb, oklch_to_hex, oklch_to_rgb, rgb_to_oklch
from styleguide.color.contrast import check_contrast
from styleguide.color.matching import find_nearest_color
from styleguide.color.named import CSS_COLORS
from styleguide.color.scales import generate_palette_from_base
from styleguide.config.loader import (
    export_config as _export_config,
    import_config as _import_config,
    load_config,
    validate_config,
)
from styleguide.config.store import ConfigStore
from styleguide.runtime.models import (
    ContrastRequest,
    ConvertRequest,
    GenerateRequest,
    MatchRequest,
    OKLCHPayload,
    RGBPayload,
)
from styleguide.runtime.serializers.css import to_css
from styleguide.runtime.serializers.swatch import to_swatches
from styleguide.schema.color import SHADE_NAMES, OKLCHColor, RGBColor
from styleguide.schema.config import ColorDefinition, ColorPalette

logger = logging.getLogger(__name__)


# =============================================================================
# Errors
# =============================================================================


class RequestError(ValueError):
    """The caller sent input the service cannot act on."""


class UnknownFormatError(RequestError):
    """Color conversion with an unrecognized ``from`` selector."""


class InvalidColorError(RequestError):
    """A color payload is missing fields or holds bad values."""


# =============================================================================
# Color handlers
# =============================================================================


def _parse_value(request: ConvertRequest) -> OKLCHColor:
    value = request.value
    if request.source == "hex":
        if not isinstance(value, str):
            raise InvalidColorError("'value' must be a hex string")
        return rgb_to_oklch(hex_to_rgb(value))
    if request.source == "rgb":
        return rgb_to_oklch(RGBPayload.model_validate(value).to_color())
    return OKLCHPayload.model_validate(value).to_color()


def convert_color(request: ConvertRequest) -> dict:
    """
    Convert a color given as hex, rgb or oklch into all three forms.

    Raises:
        UnknownFormatError: ``from`` is not hex, rgb or oklch
        InvalidColorError: ``value`` does not parse as that format
    """
    if request.source not in ("hex", "rgb", "oklch"):
        raise UnknownFormatError("Invalid format. Use: hex, rgb, or oklch")
    try:
        oklch = _parse_value(request)
    except ValidationError as e:
        raise InvalidColorError(f"Invalid {request.source} value: {e.error_count()} error(s)") from e
    except ValueError as e:
        raise InvalidColorError(str(e)) from e

    return {
        "oklch": oklch.to_dict(),
        "rgb": oklch_to_rgb(oklch).to_dict(),
        "hex": oklch_to_hex(oklch),
    }


def _as_rgb(payload) -> RGBColor:
    color = payload.to_color()
    return color if isinstance(color, RGBColor) else oklch_to_rgb(color)


def contrast(request: ContrastRequest) -> dict:
    """WCAG contrast of ``foreground`` on ``background`` (RGB or OKLCH each)."""
    result = check_contrast(
        _as_rgb(request.foreground),
        _as_rgb(request.background),
        request.is_large_text,
    )
    return result.to_dict()


def match_color(request: MatchRequest) -> Optional[dict]:
    """Nearest CSS named color to ``color``, or None."""
    match = find_nearest_color(request.color.to_color())
    return match.to_dict() if match is not None else None


def list_named_colors() -> list[dict]:
    """Every CSS named color with its OKLCH, hex and RGB forms."""
    return [
        {
            "name": name,
            "oklch": oklch.to_dict(),
            "hex": oklch_to_hex(oklch),
            "rgb": oklch_to_rgb(oklch).to_dict(),
        }
        for name, oklch in CSS_COLORS.items()
    ]


# =============================================================================
# Palette generation
# =============================================================================

# family -> (palette title, {shade index: (description, usage)})
_FAMILY_NOTES = {
    "primary": ("Primary", {5: ("Base color", "Primary buttons, links, key UI elements")}),
    "neutral": ("Neutral", {0: (None, "Backgrounds"), 9: (None, "Text")}),
    "success": ("Success", {5: (None, "Success messages, confirmations")}),
    "warning": ("Warning", {5: (None, "Warning messages, alerts")}),
    "error": ("Error", {5: (None, "Error messages, destructive actions")}),
}


def palettes_from_base(base: OKLCHColor) -> tuple[ColorPalette, ...]:
    """Semantic palette as named ``{family}-{shade}`` config palettes."""
    palettes = []
    for family, ramp in generate_palette_from_base(base).families():
        title, notes = _FAMILY_NOTES[family]
        colors = []
        for i, (shade, color) in enumerate(zip(SHADE_NAMES, ramp)):
            description, usage = notes.get(i, (None, None))
            colors.append(ColorDefinition(
                name=f"{family}-{shade}",
                oklch=color,
                description=description,
                usage=usage,
            ))
        palettes.append(ColorPalette(name=title, colors=tuple(colors)))
    return tuple(palettes)


def generate_palette(request: GenerateRequest, store: ConfigStore) -> dict:
    """Replace the stored palettes with ramps generated from ``baseColor``."""
    palettes = palettes_from_base(request.base_color.to_color())

    config = store.update(lambda current: replace(current, palettes=palettes))
    logger.info("Generated palette from base %s", oklch_to_hex(palettes[0].colors[5].oklch))
    return {"success": True, "config": config.to_dict()}


# =============================================================================
# Config handlers
# =============================================================================


def get_config(store: ConfigStore) -> dict:
    return store.current.to_dict()


def update_config(partial: dict, store: ConfigStore) -> dict:
    """Merge ``partial`` over the defaults, store it and report warnings."""
    config = load_config(partial)
    warnings = validate_config(config)
    store.replace(config)
    return {"success": True, "config": config.to_dict(), "warnings": warnings}


def reset_config(store: ConfigStore) -> dict:
    return {"success": True, "config": store.reset().to_dict()}


def export_config(store: ConfigStore) -> str:
    return _export_config(store.current)


def import_config(text: str, store: ConfigStore) -> dict:
    """Load JSON text over the defaults, store it and report warnings."""
    config = _import_config(text)
    warnings = validate_config(config)
    store.replace(config)
    return {"success": True, "config": config.to_dict(), "warnings": warnings}


def validate_config_request(partial: dict) -> dict:
    """Validate without storing."""
    warnings = validate_config(load_config(partial))
    return {"valid": not warnings, "warnings": warnings}


def describe_palettes(store: ConfigStore) -> list[dict]:
    return to_swatches(store.current)


def stylesheet(store: ConfigStore) -> str:
    return to_css(store.current)


def health() -> dict:
    return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}
