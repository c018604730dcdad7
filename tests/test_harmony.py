# Copyright (c) 2026 Luvtone
# SPDX-License-Identifier: MIT

"""Tests for hue relationships, temperature and color names."""

import pytest

from luvtone.schema import BLACK, Harmony, RGBColor, Temperature
from luvtone.analyze.harmony import (
    classify_hue_difference,
    color_name,
    evaluate_harmony,
    hue_difference,
    temperature,
)
from luvtone.analyze.schemes import complementary, triadic


class TestHueDifference:

    def test_wraps_around(self):
        assert hue_difference(350.0, 10.0) == pytest.approx(20.0)
        assert hue_difference(10.0, 350.0) == pytest.approx(20.0)

    def test_opposite(self):
        assert hue_difference(0.0, 180.0) == 180.0
        assert hue_difference(90.0, 270.0) == 180.0

    def test_range(self):
        for h1 in range(0, 360, 17):
            for h2 in range(0, 360, 23):
                assert 0.0 <= hue_difference(h1, h2) <= 180.0


class TestClassify:

    @pytest.mark.parametrize("diff,expected", [
        (0.0, Harmony.ANALOGOUS),
        (29.9, Harmony.ANALOGOUS),
        (180.0, Harmony.COMPLEMENTARY),
        (151.0, Harmony.COMPLEMENTARY),
        (120.0, Harmony.TRIADIC),
        (75.0, Harmony.SQUARE),
        (30.0, Harmony.DISCORDANT),
    ])
    def test_bands(self, diff, expected):
        assert classify_hue_difference(diff) is expected

    def test_overlap_resolves_to_earlier_band(self):
        # 100 is inside both the triadic and square bands
        assert classify_hue_difference(100.0) is Harmony.TRIADIC


class TestEvaluateHarmony:

    def test_same_color(self):
        assert evaluate_harmony("#FF0000", "#FF0000") is Harmony.ANALOGOUS

    def test_complement(self):
        red = RGBColor(255, 0, 0)
        assert evaluate_harmony(red, complementary(red)) is Harmony.COMPLEMENTARY

    def test_triad(self):
        base, second, _ = triadic("#3941C8")
        assert evaluate_harmony(base, second) is Harmony.TRIADIC

    def test_label(self):
        assert evaluate_harmony("#FF0000", "#FF0000").label == "Analogous (harmonious)"


class TestTemperature:

    @pytest.mark.parametrize("hex_color,expected", [
        ("#FF0000", Temperature.WARM),
        ("#00FF00", Temperature.COOL),
        ("#00FFFF", Temperature.COOL),
        ("#0000FF", Temperature.WARM),
    ])
    def test_primaries(self, hex_color, expected):
        assert temperature(hex_color) is expected

    def test_achromatic_hue_is_warm(self):
        assert temperature(BLACK) is Temperature.WARM


class TestColorName:

    @pytest.mark.parametrize("hex_color,name", [
        ("#FF0000", "Red"),
        ("#00ff00", "Lime"),
        ("0000FF", "Blue"),
        ("#FFFFFF", "White"),
        ("#000000", "Black"),
    ])
    def test_known(self, hex_color, name):
        assert color_name(hex_color) == name

    def test_unknown(self):
        assert color_name(RGBColor(1, 2, 3)) == "Unknown"
