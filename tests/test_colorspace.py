# Copyright (c) 2026 Styleguide
# SPDX-License-Identifier: MIT

"""Tests for color space conversions (sRGB ↔ OKLab ↔ OKLCH ↔ hex)."""

import numpy as np
import pytest

from styleguide.color.colorspace import (
    srgb_to_linear,
    linear_to_srgb,
    linear_rgb_to_oklab,
    oklab_to_linear_rgb,
    oklab_to_oklch,
    oklch_to_oklab,
    srgb_to_oklch,
    oklch_to_srgb,
    oklch_to_rgb,
    rgb_to_oklch,
    rgb_to_hex,
    hex_to_rgb,
    oklch_to_hex,
    hex_to_oklch,
    format_oklch,
)
from styleguide.schema import OKLCHColor, RGBColor


class TestSRGBLinearRoundtrip:
    """sRGB ↔ Linear RGB conversions must roundtrip accurately."""

    def test_roundtrip_mid_gray(self):
        srgb = np.array([0.5, 0.5, 0.5])
        recovered = linear_to_srgb(srgb_to_linear(srgb))
        np.testing.assert_allclose(recovered, srgb, atol=1e-10)

    def test_roundtrip_extremes(self):
        srgb = np.array([0.0, 1.0, 0.0])
        recovered = linear_to_srgb(srgb_to_linear(srgb))
        np.testing.assert_allclose(recovered, srgb, atol=1e-10)

    def test_gamma_threshold(self):
        """Values below 0.04045 use linear segment."""
        val = 0.03
        linear = srgb_to_linear(np.array([val]))
        assert float(linear[0]) == pytest.approx(val / 12.92, abs=1e-10)

    def test_encode_linear_segment(self):
        val = 0.002
        srgb = linear_to_srgb(np.array([val]))
        assert float(srgb[0]) == pytest.approx(val * 12.92, abs=1e-12)

    def test_out_of_gamut_clipped(self):
        srgb = linear_to_srgb(np.array([-0.2, 1.4, 0.5]))
        assert srgb[0] == 0.0
        assert srgb[1] == 1.0

    def test_batch_roundtrip(self):
        srgb = np.random.RandomState(42).random((100, 3))
        recovered = linear_to_srgb(srgb_to_linear(srgb))
        np.testing.assert_allclose(recovered, srgb, atol=1e-10)


class TestOKLabRoundtrip:
    """Linear RGB ↔ OKLab conversions with the published matrices."""

    def test_white_lightness_is_one(self):
        lab = linear_rgb_to_oklab(np.array([1.0, 1.0, 1.0]))
        assert lab[0] == pytest.approx(1.0, abs=1e-6)
        assert lab[1] == pytest.approx(0.0, abs=1e-6)
        assert lab[2] == pytest.approx(0.0, abs=1e-6)

    def test_black_lightness_is_zero(self):
        lab = linear_rgb_to_oklab(np.array([0.0, 0.0, 0.0]))
        np.testing.assert_allclose(lab, [0.0, 0.0, 0.0], atol=1e-12)

    def test_white_from_oklab(self):
        rgb = oklab_to_linear_rgb(np.array([1.0, 0.0, 0.0]))
        np.testing.assert_allclose(rgb, [1.0, 1.0, 1.0], atol=1e-6)

    def test_batch_roundtrip(self):
        rgb = np.random.RandomState(42).random((50, 3))
        recovered = oklab_to_linear_rgb(linear_rgb_to_oklab(rgb))
        np.testing.assert_allclose(recovered, rgb, atol=1e-6)


class TestOKLCH:
    """OKLab ↔ OKLCH conversions."""

    def test_roundtrip_chromatic(self):
        lab = np.array([0.7, 0.1, -0.05])
        recovered = oklch_to_oklab(oklab_to_oklch(lab))
        np.testing.assert_allclose(recovered, lab, atol=1e-10)

    def test_chroma_calculation(self):
        lch = oklab_to_oklch(np.array([0.5, 0.3, 0.4]))
        assert lch[1] == pytest.approx(0.5, abs=1e-10)

    def test_hue_range(self):
        """Hue must be in [0, 360)."""
        lch = oklab_to_oklch(np.array([0.5, -0.1, -0.1]))
        assert 0.0 <= lch[2] < 360.0
        assert lch[2] == pytest.approx(225.0)

    def test_tiny_negative_angle_is_zero_not_360(self):
        lch = oklab_to_oklch(np.array([0.5, 1.0, -1e-20]))
        assert 0.0 <= lch[2] < 360.0

    def test_full_chain_primaries(self):
        for srgb in ([1.0, 0.0, 0.0], [0.0, 1.0, 0.0], [0.0, 0.0, 1.0]):
            recovered = oklch_to_srgb(srgb_to_oklch(np.array(srgb)))
            np.testing.assert_allclose(recovered, srgb, atol=1e-4)


class TestValueConversion:
    """OKLCHColor ↔ RGBColor."""

    def test_black(self):
        assert oklch_to_rgb(OKLCHColor(l=0.0, c=0.0, h=0.0)) == RGBColor(0, 0, 0)

    def test_white(self):
        assert oklch_to_rgb(OKLCHColor(l=1.0, c=0.0, h=0.0)) == RGBColor(255, 255, 255)

    def test_alpha_passes_through(self):
        rgb = oklch_to_rgb(OKLCHColor(l=0.5, c=0.1, h=120.0, alpha=0.4))
        assert rgb.alpha == 0.4
        back = rgb_to_oklch(RGBColor(10, 20, 30, alpha=0.25))
        assert back.alpha == 0.25

    def test_out_of_gamut_is_clamped(self):
        rgb = oklch_to_rgb(OKLCHColor(l=0.7, c=0.4, h=145.0))
        for channel in (rgb.r, rgb.g, rgb.b):
            assert 0 <= channel <= 255

    def test_red_to_oklch(self):
        c = rgb_to_oklch(RGBColor(255, 0, 0))
        assert c.l == pytest.approx(0.628, abs=0.005)
        assert c.c == pytest.approx(0.258, abs=0.005)
        assert c.h == pytest.approx(29.23, abs=0.2)

    def test_rgb_roundtrip_exact(self):
        for r, g, b in [(255, 0, 0), (12, 200, 99), (128, 128, 128), (250, 240, 230), (1, 2, 3)]:
            rgb = RGBColor(r, g, b)
            assert oklch_to_rgb(rgb_to_oklch(rgb)) == rgb

    def test_oklch_roundtrip_approximate(self):
        """8-bit quantization makes the roundtrip lossy, but only slightly."""
        for original in [
            OKLCHColor(l=0.6, c=0.1, h=200.0),
            OKLCHColor(l=0.75, c=0.08, h=150.0),
            OKLCHColor(l=0.45, c=0.12, h=30.0),
        ]:
            recovered = rgb_to_oklch(oklch_to_rgb(original))
            assert recovered.l == pytest.approx(original.l, abs=0.01)
            assert recovered.c == pytest.approx(original.c, abs=0.01)
            assert recovered.h == pytest.approx(original.h, abs=3.0)

    def test_gray_has_near_zero_chroma(self):
        c = rgb_to_oklch(RGBColor(128, 128, 128))
        assert c.c < 1e-4
        assert 0.0 <= c.h < 360.0


class TestHexConversion:
    """Hex ↔ RGB ↔ OKLCH."""

    def test_rgb_to_hex_lowercase(self):
        assert rgb_to_hex(RGBColor(255, 0, 128)) == "#ff0080"

    def test_rgb_to_hex_pads(self):
        assert rgb_to_hex(RGBColor(0, 5, 10)) == "#00050a"

    def test_rgb_to_hex_alpha(self):
        assert rgb_to_hex(RGBColor(255, 0, 128, alpha=0.5)) == "#ff008080"

    def test_opaque_alpha_omitted(self):
        assert len(rgb_to_hex(RGBColor(1, 2, 3, alpha=1.0))) == 7

    def test_hex_to_rgb(self):
        assert hex_to_rgb("#FF0080") == RGBColor(255, 0, 128)
        assert hex_to_rgb("ff0080") == RGBColor(255, 0, 128)

    def test_hex_to_rgb_alpha(self):
        rgb = hex_to_rgb("#ff008033")
        assert rgb.alpha == pytest.approx(0x33 / 255)

    def test_mixed_case_normalizes(self):
        assert rgb_to_hex(hex_to_rgb("#AbCdEf")) == "#abcdef"

    def test_hex_roundtrip(self):
        rng = np.random.RandomState(7)
        for r, g, b in rng.randint(0, 256, size=(25, 3)):
            rgb = RGBColor(int(r), int(g), int(b))
            assert hex_to_rgb(rgb_to_hex(rgb)) == rgb

    def test_hex_roundtrip_with_alpha(self):
        rgb = RGBColor(10, 20, 30, alpha=51 / 255)
        recovered = hex_to_rgb(rgb_to_hex(rgb))
        assert (recovered.r, recovered.g, recovered.b) == (10, 20, 30)
        assert recovered.alpha == pytest.approx(rgb.alpha)

    @pytest.mark.parametrize("bad", ["#abc", "12345", "#gggggg", "", "#1234567"])
    def test_invalid_hex(self, bad):
        with pytest.raises(ValueError, match="Invalid hex"):
            hex_to_rgb(bad)

    def test_oklch_to_hex_blue(self):
        hex_val = oklch_to_hex(OKLCHColor(l=0.55, c=0.2, h=250.0))
        assert len(hex_val) == 7
        rgb = hex_to_rgb(hex_val)
        assert rgb.r == 0
        assert rgb.b > rgb.g > rgb.r
        assert rgb.b >= 200

    def test_oklch_to_hex_deterministic(self):
        color = OKLCHColor(l=0.55, c=0.2, h=250.0)
        assert oklch_to_hex(color) == oklch_to_hex(color)

    def test_hex_to_oklch_black_white(self):
        assert hex_to_oklch("#000000").l == pytest.approx(0.0, abs=1e-9)
        assert hex_to_oklch("#ffffff").l == pytest.approx(1.0, abs=1e-6)


class TestFormatOklch:

    def test_opaque(self):
        assert format_oklch(OKLCHColor(l=0.55, c=0.2, h=250.0)) == "oklch(55.00% 0.2000 250.00)"

    def test_translucent(self):
        color = OKLCHColor(l=0.55, c=0.2, h=250.0, alpha=0.5)
        assert format_oklch(color) == "oklch(55.00% 0.2000 250.00 / 0.50)"

    def test_precision(self):
        color = OKLCHColor(l=0.12346, c=0.123456, h=12.3456)
        assert format_oklch(color) == "oklch(12.35% 0.1235 12.35)"


class TestBatchPipeline:
    """The full-chain array functions are public and shape-preserving."""

    def test_exported(self):
        from styleguide import color
        assert color.srgb_to_oklch is srgb_to_oklch
        assert color.oklch_to_srgb is oklch_to_srgb

    def test_shape_preserved(self):
        srgb = np.random.RandomState(3).random((4, 5, 3))
        lch = srgb_to_oklch(srgb)
        assert lch.shape == (4, 5, 3)
        assert oklch_to_srgb(lch).shape == (4, 5, 3)

    def test_matches_value_conversion(self):
        colors = [RGBColor(255, 0, 0), RGBColor(12, 200, 99), RGBColor(30, 60, 200)]
        batch = srgb_to_oklch(np.array([[c.r, c.g, c.b] for c in colors]) / 255.0)
        for row, rgb in zip(batch, colors):
            single = rgb_to_oklch(rgb)
            assert row[0] == pytest.approx(single.l, abs=1e-12)
            assert row[1] == pytest.approx(single.c, abs=1e-12)
            assert row[2] == pytest.approx(single.h, abs=1e-9)

    def test_out_of_gamut_clipped(self):
        srgb = oklch_to_srgb(np.array([[0.7, 0.4, 145.0], [0.5, 0.0, 0.0]]))
        assert srgb.min() >= 0.0
        assert srgb.max() <= 1.0
