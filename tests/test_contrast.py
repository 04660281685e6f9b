# Copyright (c) 2026 Styleguide
# SPDX-License-Identifier: MIT

"""Tests for WCAG luminance and contrast scoring."""

import pytest

from styleguide.color.contrast import (
    check_contrast,
    classify_contrast,
    get_contrast_ratio,
    get_relative_luminance,
)
from styleguide.schema import ContrastLevel, RGBColor

WHITE = RGBColor(255, 255, 255)
BLACK = RGBColor(0, 0, 0)


class TestRelativeLuminance:

    def test_black_is_zero(self):
        assert get_relative_luminance(BLACK) == 0.0

    def test_white_is_one(self):
        assert get_relative_luminance(WHITE) == pytest.approx(1.0)

    def test_green_dominates(self):
        red = get_relative_luminance(RGBColor(255, 0, 0))
        green = get_relative_luminance(RGBColor(0, 255, 0))
        blue = get_relative_luminance(RGBColor(0, 0, 255))
        assert red == pytest.approx(0.2126)
        assert green == pytest.approx(0.7152)
        assert blue == pytest.approx(0.0722)

    def test_linear_segment(self):
        # 10/255 = 0.0392 <= 0.03928
        lum = get_relative_luminance(RGBColor(10, 10, 10))
        assert lum == pytest.approx(10 / 255 / 12.92)


class TestContrastRatio:

    def test_black_on_white_is_21(self):
        assert get_contrast_ratio(BLACK, WHITE) == pytest.approx(21.0)

    def test_identical_is_one(self):
        gray = RGBColor(120, 130, 140)
        assert get_contrast_ratio(gray, gray) == pytest.approx(1.0)

    def test_symmetric(self):
        a = RGBColor(30, 60, 200)
        b = RGBColor(240, 220, 10)
        assert get_contrast_ratio(a, b) == get_contrast_ratio(b, a)

    def test_monotonic_toward_white(self):
        ratios = [
            get_contrast_ratio(WHITE, RGBColor(v, v, v))
            for v in (0, 64, 128, 192, 255)
        ]
        assert ratios == sorted(ratios, reverse=True)
        assert len(set(ratios)) == len(ratios)

    def test_known_gray(self):
        """#767676 is the lightest gray passing AA on white."""
        assert get_contrast_ratio(RGBColor(0x76, 0x76, 0x76), WHITE) == pytest.approx(4.54, abs=0.01)


class TestClassification:

    def test_exactly_aa_passes(self):
        result = classify_contrast(4.5)
        assert result.pass_aa
        assert not result.pass_aaa
        assert result.level is ContrastLevel.AA

    def test_just_below_aa_fails(self):
        result = classify_contrast(4.499999)
        assert not result.pass_aa
        assert result.level is ContrastLevel.FAIL

    def test_aaa(self):
        result = classify_contrast(7.0)
        assert result.pass_aa and result.pass_aaa
        assert result.level is ContrastLevel.AAA

    def test_large_text_thresholds(self):
        assert classify_contrast(3.0, is_large_text=True).level is ContrastLevel.AA
        assert classify_contrast(2.99, is_large_text=True).level is ContrastLevel.FAIL
        assert classify_contrast(4.5, is_large_text=True).level is ContrastLevel.AAA

    def test_ratio_preserved(self):
        assert classify_contrast(5.25).ratio == 5.25


class TestCheckContrast:

    def test_black_on_white(self):
        result = check_contrast(BLACK, WHITE)
        assert result.level is ContrastLevel.AAA
        assert result.ratio == pytest.approx(21.0)

    def test_light_gray_fails(self):
        result = check_contrast(RGBColor(200, 200, 200), WHITE)
        assert result.level is ContrastLevel.FAIL

    def test_large_text_relaxes(self):
        fg = RGBColor(0x94, 0x94, 0x94)  # ~3.0:1 on white
        normal = check_contrast(fg, WHITE)
        large = check_contrast(fg, WHITE, is_large_text=True)
        assert not normal.pass_aa
        assert large.ratio == normal.ratio
        assert large.pass_aa

    def test_to_dict(self):
        d = check_contrast(BLACK, WHITE).to_dict()
        assert set(d) == {"ratio", "passAA", "passAAA", "level"}
        assert d["level"] == "AAA"
