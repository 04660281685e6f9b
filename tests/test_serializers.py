# Copyright (c) 2026 Styleguide
# SPDX-License-Identifier: MIT

"""Tests for the runtime serializers (css, swatch)."""

import json

import pytest

from styleguide.config import DEFAULT_CONFIG, load_config
from styleguide.runtime.serializers import css_ident, to_css, to_swatch, to_swatches
from styleguide.schema import ColorDefinition, OKLCHColor


def _config_with(*colors):
    return load_config({"palettes": [{"name": "Test", "colors": [
        {"name": name, "oklch": {"l": l, "c": c, "h": h}} for name, l, c, h in colors
    ]}]})


class TestCssIdent:

    def test_already_clean(self):
        assert css_ident("primary-500") == "primary-500"

    def test_normalizes(self):
        assert css_ident("Primary 500!") == "primary-500"

    def test_collapses_runs(self):
        assert css_ident("  Brand   Blue  ") == "brand-blue"


class TestToCss:

    def test_root_block_first(self):
        css = to_css(DEFAULT_CONFIG)
        assert css.startswith(":root {\n")
        assert css.endswith("}\n")

    def test_typography_properties(self):
        css = to_css(DEFAULT_CONFIG)
        assert "  --text-h1: 3rem;" in css
        assert "  --leading-normal: 1.5;" in css
        assert "  --leading-tight: 1.25;" in css
        assert "  --weight-semibold: 600;" in css
        assert "--font-mono: \"SF Mono\"" in css

    def test_spacing(self):
        assert "  --space-2xl: 3rem;" in to_css(DEFAULT_CONFIG)

    def test_color_hex_then_oklch(self):
        lines = to_css(DEFAULT_CONFIG).splitlines()
        oklch_line = "  --color-primary-500: oklch(55.00% 0.2000 250.00);"
        i = lines.index(oklch_line)
        assert lines[i - 1].startswith("  --color-primary-500: #")

    def test_palette_comments(self):
        css = to_css(DEFAULT_CONFIG)
        for name in ("Primary", "Neutral", "Semantic"):
            assert f"/* {name} */" in css

    def test_base_rules(self):
        css = to_css(DEFAULT_CONFIG)
        assert "font-size: var(--text-h3);" in css
        assert "max-width: 75ch;" in css
        assert "code, pre {" in css

    def test_translucent_color(self):
        config = load_config({"palettes": [{"name": "Glass", "colors": [
            {"name": "glass", "oklch": {"l": 1, "c": 0, "h": 0, "alpha": 0.5}},
        ]}]})
        css = to_css(config)
        assert "--color-glass: #ffffff80;" in css
        assert "--color-glass: oklch(100.00% 0.0000 0.00 / 0.50);" in css

    def test_does_not_modify_config(self):
        before = DEFAULT_CONFIG.to_dict()
        to_css(DEFAULT_CONFIG)
        assert DEFAULT_CONFIG.to_dict() == before


class TestSwatch:

    def test_white(self):
        swatch = to_swatch(ColorDefinition(name="paper", oklch=OKLCHColor(l=1.0, c=0.0, h=0.0)))
        assert swatch["hex"] == "#ffffff"
        assert swatch["match"]["name"] == "white"
        assert swatch["contrast"]["onBlack"]["ratio"] == pytest.approx(21.0)
        assert swatch["contrast"]["onWhite"]["level"] == "fail"
        assert swatch["textColor"] == "#000"

    def test_dark_uses_white_text(self):
        swatch = to_swatch(ColorDefinition(name="ink", oklch=OKLCHColor(l=0.2, c=0.02, h=250.0)))
        assert swatch["textColor"] == "#fff"

    def test_fields(self):
        swatch = to_swatch(ColorDefinition(
            name="brand", oklch=OKLCHColor(l=0.55, c=0.2, h=250.0), usage="Buttons",
        ))
        assert swatch["name"] == "brand"
        assert swatch["description"] is None
        assert swatch["usage"] == "Buttons"
        assert swatch["css"] == "oklch(55.00% 0.2000 250.00)"
        assert set(swatch["rgb"]) == {"r", "g", "b", "alpha"}

    def test_json_serializable(self):
        json.dumps(to_swatches(DEFAULT_CONFIG))

    def test_grouped_by_palette(self):
        swatches = to_swatches(_config_with(("a", 0.3, 0.1, 10), ("b", 0.7, 0.1, 200)))
        assert [g["name"] for g in swatches] == ["Test"]
        assert [s["name"] for s in swatches[0]["colors"]] == ["a", "b"]

    def test_empty_config(self):
        assert to_swatches(load_config({"palettes": []})) == []
