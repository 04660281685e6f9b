# Copyright (c) 2026 Styleguide
# SPDX-License-Identifier: MIT

"""
Loading, validating and (de)serializing style guide configuration.

User input is a partial wire-form dict. It is merged over the defaults:
- title, description and palettes replace the default wholesale
- typography sections, spacing and accessibility merge key by key

Structural problems (wrong types, missing fields, out-of-range colors)
raise ConfigError. Soft problems (weak contrast thresholds, odd type
scale) come back from validate_config as warning strings.
"""

from __future__ import annotations

import copy
import json
import logging
import re
from typing import Optional

from styleguide.config.defaults import DEFAULT_CONFIG_DATA
from styleguide.schema.config import StyleGuideConfig

logger = logging.getLogger(__name__)

_TYPOGRAPHY_SECTIONS = ("fontFamily", "scale", "lineHeight", "fontWeight")
_LEADING_NUMBER_RE = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+))")

WCAG_AA_NORMAL = 4.5
WCAG_AA_LARGE = 3.0


class ConfigError(ValueError):
    """Configuration input cannot be turned into a StyleGuideConfig."""


def _section(data: dict, key: str) -> dict:
    value = data.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigError(f"'{key}' must be an object, got {type(value).__name__}")
    return value


def merge_config_data(partial: Optional[dict]) -> dict:
    """
    Merge a partial wire-form config over the defaults.

    Returns a new dict; neither input is modified.
    """
    merged = copy.deepcopy(DEFAULT_CONFIG_DATA)
    if partial is None:
        return merged
    if not isinstance(partial, dict):
        raise ConfigError(f"Configuration must be an object, got {type(partial).__name__}")

    for key in ("title", "description", "palettes"):
        if partial.get(key) is not None:
            merged[key] = copy.deepcopy(partial[key])

    typography = _section(partial, "typography")
    for key in _TYPOGRAPHY_SECTIONS:
        merged["typography"][key].update(_section(typography, key))

    merged["spacing"].update(_section(partial, "spacing"))
    merged["accessibility"].update(_section(partial, "accessibility"))
    return merged


def load_config(partial: Optional[dict] = None) -> StyleGuideConfig:
    """
    Build a configuration from optional user overrides.

    Args:
        partial: Wire-form overrides, or None for the defaults

    Raises:
        ConfigError: If the merged data is not a valid configuration
    """
    merged = merge_config_data(partial)
    try:
        return StyleGuideConfig.from_dict(merged)
    except (KeyError, TypeError, ValueError, AttributeError, OverflowError) as e:
        raise ConfigError(f"Invalid configuration: {e}") from e


def _parse_size(size: str) -> float:
    """Leading number of a CSS length, NaN if there is none."""
    m = _LEADING_NUMBER_RE.match(size)
    return float(m.group(1)) if m else float("nan")


def validate_config(config: StyleGuideConfig) -> list[str]:
    """
    Check a configuration for design and accessibility problems.

    Returns:
        Human-readable warnings (empty when the configuration is sound)
    """
    warnings = []

    if not config.palettes:
        warnings.append("No color palettes defined")

    h1_size = _parse_size(config.typography.scale.get("h1", ""))
    body_size = _parse_size(config.typography.scale.get("body", ""))
    if h1_size < body_size:
        warnings.append("H1 font size should be larger than body text")

    if config.accessibility.min_contrast_normal < WCAG_AA_NORMAL:
        warnings.append("Normal text contrast ratio below WCAG AA standard (4.5:1)")
    if config.accessibility.min_contrast_large < WCAG_AA_LARGE:
        warnings.append("Large text contrast ratio below WCAG AA standard (3:1)")

    if warnings:
        logger.debug("Configuration produced %d warning(s)", len(warnings))
    return warnings


def export_config(config: StyleGuideConfig) -> str:
    """Serialize as indented JSON."""
    return json.dumps(config.to_dict(), indent=2)


def import_config(text: str) -> StyleGuideConfig:
    """
    Parse JSON text and load it over the defaults.

    Raises:
        ConfigError: Invalid JSON or invalid configuration
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid configuration JSON: {e}") from e
    return load_config(data)
