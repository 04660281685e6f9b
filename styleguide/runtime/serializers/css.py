# Copyright (c) 2026 Styleguide
# SPDX-License-Identifier: MIT

"""
CSS serializer for style guide configuration.

Emits a ``:root`` block of custom properties (fonts, type scale, line
heights, weights, spacing, palette colors) and base element rules that use
them. Every palette color is declared twice: a hex fallback first, then the
``oklch()`` value for browsers that support it.

Example::

    :root {
      --font-heading: -apple-system, ...;
      --space-md: 1rem;
      --color-primary-500: oklch(55.00% 0.2000 250.00);
    }
"""

from __future__ import annotations

import re

from styleguide.color.colorspace import format_oklch, oklch_to_hex
from styleguide.schema.config import StyleGuideConfig

_IDENT_RE = re.compile(r"[^a-z0-9-]+")

_HEADINGS = ("h1", "h2", "h3", "h4", "h5", "h6")


def css_ident(name: str) -> str:
    """Lowercase a token name into a custom-property-safe identifier."""
    return _IDENT_RE.sub("-", name.strip().lower()).strip("-")


def _root_block(config: StyleGuideConfig) -> list[str]:
    typo = config.typography
    lines = [":root {", "  /* Typography */"]
    lines += [f"  --font-{css_ident(k)}: {v};" for k, v in typo.font_family.items()]
    lines += [f"  --text-{css_ident(k)}: {v};" for k, v in typo.scale.items()]
    lines += [f"  --leading-{css_ident(k)}: {v:g};" for k, v in typo.line_height.items()]
    lines += [f"  --weight-{css_ident(k)}: {v};" for k, v in typo.font_weight.items()]

    lines.append("")
    lines.append("  /* Spacing */")
    lines += [f"  --space-{css_ident(k)}: {v};" for k, v in config.spacing.items()]

    for palette in config.palettes:
        lines.append("")
        lines.append(f"  /* {palette.name} */")
        for color in palette.colors:
            prop = f"--color-{css_ident(color.name)}"
            lines.append(f"  {prop}: {oklch_to_hex(color.oklch)};")
            lines.append(f"  {prop}: {format_oklch(color.oklch)};")

    lines.append("}")
    return lines


def _base_rules(config: StyleGuideConfig) -> list[str]:
    typo = config.typography
    lines = [
        "body {",
        "  font-family: var(--font-body);",
        f"  font-size: {typo.scale.get('body', '1rem')};",
        f"  line-height: {typo.line_height.get('normal', 1.5):g};",
        "}",
    ]
    for tag in _HEADINGS:
        if tag not in typo.scale:
            continue
        lines += [
            "",
            f"{tag} {{",
            "  font-family: var(--font-heading);",
            f"  font-size: var(--text-{tag});",
            f"  font-weight: {typo.font_weight.get('bold', 700)};",
            f"  line-height: {typo.line_height.get('tight', 1.25):g};",
            "}",
        ]
    lines += [
        "",
        "code, pre {",
        "  font-family: var(--font-mono);",
        "}",
        "",
        "p {",
        f"  max-width: {config.accessibility.max_line_length}ch;",
        "}",
    ]
    return lines


def to_css(config: StyleGuideConfig) -> str:
    """
    Render a configuration as a stylesheet.

    Args:
        config: The style guide configuration

    Returns:
        CSS text ending in a newline
    """
    lines = _root_block(config) + [""] + _base_rules(config)
    return "\n".join(lines) + "\n"
