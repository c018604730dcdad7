# Copyright (c) 2026 Luvtone
# SPDX-License-Identifier: MIT

"""Tests for device RGB ↔ CMYK."""

import itertools

import pytest

from luvtone.schema import BLACK, WHITE, CMYKColor, RGBColor
from luvtone.convert.cmyk import cmyk_to_rgb, rgb_to_cmyk


class TestRGBToCMYK:

    def test_red(self):
        assert rgb_to_cmyk("#FF0000") == CMYKColor(c=0.0, m=1.0, y=1.0, k=0.0)

    def test_black_short_circuits(self):
        assert rgb_to_cmyk(BLACK) == CMYKColor(c=0.0, m=0.0, y=0.0, k=1.0)

    def test_white_is_blank(self):
        assert rgb_to_cmyk(WHITE) == CMYKColor(c=0.0, m=0.0, y=0.0, k=0.0)

    def test_gray_is_key_only(self):
        cmyk = rgb_to_cmyk(RGBColor(128, 128, 128))
        assert cmyk.c == cmyk.m == cmyk.y == 0.0
        assert cmyk.k == pytest.approx(1.0 - 128 / 255)

    def test_components_are_unrounded(self):
        cmyk = rgb_to_cmyk(RGBColor(255, 128, 0))
        assert cmyk.m == pytest.approx(127 / 255)

    def test_black_extraction(self):
        for rgb in itertools.product([0, 40, 128, 255], repeat=3):
            cmyk = rgb_to_cmyk(RGBColor(*rgb))
            assert min(cmyk.c, cmyk.m, cmyk.y) == pytest.approx(0.0, abs=1e-12)


class TestCMYKToRGB:

    def test_half_key_rounds_up(self):
        assert cmyk_to_rgb(CMYKColor(c=0.0, m=0.0, y=0.0, k=0.5)) == RGBColor(128, 128, 128)

    def test_full_key_is_black(self):
        assert cmyk_to_rgb(CMYKColor(c=0.3, m=0.6, y=0.9, k=1.0)) == BLACK

    def test_roundtrip(self):
        for rgb in itertools.product([0, 1, 64, 127, 128, 200, 254, 255], repeat=3):
            color = RGBColor(*rgb)
            assert cmyk_to_rgb(rgb_to_cmyk(color)) == color
