# Copyright (c) 2026 Styleguide
# SPDX-License-Identifier: MIT

"""Default style guide: blue brand ramp, system fonts, 4px-based spacing."""

from __future__ import annotations

from styleguide.schema.config import StyleGuideConfig

_SYSTEM_SANS = (
    '-apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, '
    '"Helvetica Neue", Arial, sans-serif'
)
_SYSTEM_MONO = (
    '"SF Mono", Monaco, "Cascadia Code", "Roboto Mono", Consolas, '
    '"Courier New", monospace'
)


def _color(name, l, c, h, description=None, usage=None):
    d = {"name": name, "oklch": {"l": l, "c": c, "h": h}}
    if description is not None:
        d["description"] = description
    if usage is not None:
        d["usage"] = usage
    return d


# Wire form (camelCase); load_config merges partial input over this.
DEFAULT_CONFIG_DATA = {
    "title": "Design System",
    "description": "A comprehensive style guide for consistent design",
    "palettes": [
        {
            "name": "Primary",
            "colors": [
                _color("primary-50", 0.95, 0.02, 250,
                       "Lightest primary shade", "Backgrounds, subtle accents"),
                _color("primary-100", 0.9, 0.04, 250, usage="Hover states, borders"),
                _color("primary-500", 0.55, 0.2, 250,
                       "Main brand color", "Primary buttons, links, key UI elements"),
                _color("primary-700", 0.4, 0.18, 250, usage="Active states, emphasis"),
                _color("primary-900", 0.25, 0.12, 250,
                       "Darkest primary shade", "Text on light backgrounds"),
            ],
        },
        {
            "name": "Neutral",
            "colors": [
                _color("neutral-50", 0.98, 0.005, 250, usage="Page backgrounds"),
                _color("neutral-100", 0.95, 0.005, 250, usage="Card backgrounds"),
                _color("neutral-300", 0.85, 0.01, 250, usage="Borders, dividers"),
                _color("neutral-500", 0.6, 0.01, 250, usage="Secondary text, icons"),
                _color("neutral-700", 0.4, 0.015, 250, usage="Body text"),
                _color("neutral-900", 0.2, 0.02, 250, usage="Headings, emphasis"),
            ],
        },
        {
            "name": "Semantic",
            "colors": [
                _color("success", 0.65, 0.18, 145,
                       "Success states", "Success messages, confirmations"),
                _color("warning", 0.75, 0.15, 85,
                       "Warning states", "Warnings, caution messages"),
                _color("error", 0.6, 0.22, 25,
                       "Error states", "Error messages, destructive actions"),
                _color("info", 0.65, 0.18, 230,
                       "Informational states", "Info messages, tips"),
            ],
        },
    ],
    "typography": {
        "fontFamily": {
            "heading": _SYSTEM_SANS,
            "body": _SYSTEM_SANS,
            "mono": _SYSTEM_MONO,
        },
        "scale": {
            "h1": "3rem",
            "h2": "2.25rem",
            "h3": "1.875rem",
            "h4": "1.5rem",
            "h5": "1.25rem",
            "h6": "1.125rem",
            "body": "1rem",
            "small": "0.875rem",
        },
        "lineHeight": {
            "tight": 1.25,
            "normal": 1.5,
            "relaxed": 1.75,
        },
        "fontWeight": {
            "light": 300,
            "normal": 400,
            "medium": 500,
            "semibold": 600,
            "bold": 700,
        },
    },
    "spacing": {
        "xs": "0.25rem",
        "sm": "0.5rem",
        "md": "1rem",
        "lg": "1.5rem",
        "xl": "2rem",
        "2xl": "3rem",
        "3xl": "4rem",
        "4xl": "6rem",
    },
    "accessibility": {
        "minContrastNormal": 4.5,   # WCAG AA, normal text
        "minContrastLarge": 3,      # WCAG AA, 18pt+ text
        "minContrastAAA": 7,
        "minFontSize": "16px",
        "maxLineLength": 75,        # characters
    },
}


DEFAULT_CONFIG = StyleGuideConfig.from_dict(DEFAULT_CONFIG_DATA)
