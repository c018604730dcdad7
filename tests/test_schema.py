# Copyright (c) 2026 Luvtone
# SPDX-License-Identifier: MIT

"""Tests for schema types, validation and serialization roundtrips."""

import math

import pytest

from luvtone.errors import InvalidColorInput
from luvtone.schema import (
    BLACK,
    COLOR_NAMES,
    STANDARD_COLORS,
    WCAG_CONTRAST_RATIOS,
    WHITE,
    CMYKColor,
    DichromacyType,
    Harmony,
    HPLuvColor,
    HSLuvColor,
    RGBColor,
    TextSize,
    WCAGLevel,
    as_rgb,
    check_int,
    check_range,
    coerce_enum,
    normalize_hue,
    parse_hex,
)
from luvtone.convert import colorspace


class TestInvalidColorInput:

    def test_is_value_error(self):
        assert issubclass(InvalidColorInput, ValueError)

    def test_carries_details(self):
        err = InvalidColorInput("hex", "#12", "a 6-digit hex color")
        assert err.field == "hex"
        assert err.value == "#12"
        assert err.expected == "a 6-digit hex color"
        assert str(err) == "Invalid hex: '#12' (expected a 6-digit hex color)"


class TestRGBColor:

    def test_valid_color(self):
        c = RGBColor(57, 65, 200)
        assert c.as_tuple() == (57, 65, 200)
        assert c.hex == "#3941C8"

    def test_integral_floats_are_accepted(self):
        c = RGBColor(1.0, 2.0, 3.0)
        assert c.as_tuple() == (1, 2, 3)
        assert isinstance(c.r, int)

    @pytest.mark.parametrize("channels", [(256, 0, 0), (0, -1, 0), (0, 0, 1.5)])
    def test_out_of_range(self, channels):
        with pytest.raises(InvalidColorInput):
            RGBColor(*channels)

    def test_rejects_bool(self):
        with pytest.raises(InvalidColorInput, match="r"):
            RGBColor(True, 0, 0)

    def test_rejects_string_channel(self):
        with pytest.raises(InvalidColorInput):
            RGBColor("ff", 0, 0)

    def test_frozen(self):
        c = RGBColor(1, 2, 3)
        with pytest.raises(AttributeError):
            c.r = 5

    def test_from_hex(self):
        assert RGBColor.from_hex("#ff8800") == RGBColor(255, 136, 0)
        assert RGBColor.from_hex("  00FF00 ") == RGBColor(0, 255, 0)

    def test_to_dict_roundtrip(self):
        c = RGBColor(10, 20, 30)
        assert c.to_dict() == {"r": 10, "g": 20, "b": 30}
        assert RGBColor.from_dict(c.to_dict()) == c

    def test_as_rgb(self):
        c = RGBColor(1, 2, 3)
        assert as_rgb(c) is c
        assert as_rgb("#010203") == c


class TestHSLuvColor:

    def test_hue_is_normalized(self):
        assert HSLuvColor(h=-30.0, s=50.0, l=50.0).h == pytest.approx(330.0)
        assert HSLuvColor(h=720.0, s=50.0, l=50.0).h == 0.0

    def test_non_finite_hue_is_zero(self):
        assert HSLuvColor(h=math.nan, s=50.0, l=50.0).h == 0.0
        assert HSLuvColor(h=math.inf, s=50.0, l=50.0).h == 0.0

    def test_invalid_saturation(self):
        with pytest.raises(InvalidColorInput) as excinfo:
            HSLuvColor(h=0.0, s=101.0, l=50.0)
        assert excinfo.value.field == "s"
        assert excinfo.value.expected == "a number between 0 and 100"

    def test_invalid_lightness(self):
        with pytest.raises(InvalidColorInput, match="Invalid l"):
            HSLuvColor(h=0.0, s=50.0, l=-0.5)

    def test_nan_saturation(self):
        with pytest.raises(InvalidColorInput):
            HSLuvColor(h=0.0, s=math.nan, l=50.0)

    def test_to_dict_roundtrip(self):
        c = HSLuvColor(h=12.5, s=80.0, l=40.0)
        assert HSLuvColor.from_dict(c.to_dict()) == c


class TestHPLuvColor:

    def test_percent_may_exceed_100(self):
        c = HPLuvColor(h=10.0, p=250.0, l=50.0)
        assert c.p == 250.0

    @pytest.mark.parametrize("p", [math.inf, math.nan])
    def test_non_finite_percent(self, p):
        with pytest.raises(InvalidColorInput) as excinfo:
            HPLuvColor(h=0.0, p=p, l=50.0)
        assert excinfo.value.field == "p"

    def test_negative_percent(self):
        with pytest.raises(InvalidColorInput) as excinfo:
            HPLuvColor(h=10.0, p=-1.0, l=50.0)
        assert excinfo.value.expected == "a number >= 0"

    def test_to_dict_roundtrip(self):
        c = HPLuvColor(h=200.0, p=30.0, l=70.0)
        assert HPLuvColor.from_dict(c.to_dict()) == c


class TestCMYKColor:

    def test_valid_color(self):
        c = CMYKColor(c=0.0, m=0.5, y=1.0, k=0.25)
        assert c.to_dict() == {"c": 0.0, "m": 0.5, "y": 1.0, "k": 0.25}

    @pytest.mark.parametrize("field", ["c", "m", "y", "k"])
    def test_out_of_range(self, field):
        values = {"c": 0.0, "m": 0.0, "y": 0.0, "k": 0.0}
        values[field] = 1.1
        with pytest.raises(InvalidColorInput) as excinfo:
            CMYKColor(**values)
        assert excinfo.value.field == field

    def test_to_dict_roundtrip(self):
        c = CMYKColor(c=0.1, m=0.2, y=0.3, k=0.4)
        assert CMYKColor.from_dict(c.to_dict()) == c


class TestHelpers:

    def test_normalize_hue(self):
        assert normalize_hue(360.0) == 0.0
        assert normalize_hue(-1e-20) == 0.0
        assert normalize_hue(-90.0) == 270.0
        assert normalize_hue(45) == 45.0

    def test_check_range_inclusive(self):
        assert check_range("x", 0, 0.0, 1.0) == 0.0
        assert check_range("x", "1", 0.0, 1.0) == 1.0

    def test_check_range_rejects_garbage(self):
        with pytest.raises(InvalidColorInput):
            check_range("x", None, 0.0, 1.0)

    def test_check_range_rejects_infinity_with_open_bound(self):
        with pytest.raises(InvalidColorInput, match="a number >= 0"):
            check_range("x", math.inf, 0.0, math.inf)

    def test_parse_hex_lives_with_records(self):
        assert parse_hex("#3941c8") == (57, 65, 200)
        assert colorspace.parse_hex is parse_hex

    def test_check_int_bounds(self):
        assert check_int("count", 20, 1, 20) == 20
        with pytest.raises(InvalidColorInput) as excinfo:
            check_int("count", 21, 1, 20)
        assert excinfo.value.expected == "an integer between 1 and 20"

    def test_check_int_rejects_fraction(self):
        with pytest.raises(InvalidColorInput, match="an integer >= 1"):
            check_int("count", 2.5, 1)

    def test_coerce_enum(self):
        assert coerce_enum(WCAGLevel, "AAA", "level") is WCAGLevel.AAA
        assert coerce_enum(TextSize, TextSize.LARGE, "size") is TextSize.LARGE

    def test_coerce_enum_rejects_unknown(self):
        with pytest.raises(InvalidColorInput) as excinfo:
            coerce_enum(DichromacyType, "achromatopsia", "type")
        assert excinfo.value.field == "type"
        assert "'protanopia'" in excinfo.value.expected


class TestConstantTables:

    def test_wcag_thresholds(self):
        assert WCAG_CONTRAST_RATIOS[(WCAGLevel.AA, TextSize.SMALL)] == 4.5
        assert WCAG_CONTRAST_RATIOS[(WCAGLevel.AA, TextSize.LARGE)] == 3.0
        assert WCAG_CONTRAST_RATIOS[(WCAGLevel.AAA, TextSize.SMALL)] == 7.0
        assert WCAG_CONTRAST_RATIOS[(WCAGLevel.AAA, TextSize.LARGE)] == 4.5

    def test_tables_are_read_only(self):
        with pytest.raises(TypeError):
            WCAG_CONTRAST_RATIOS[(WCAGLevel.AA, TextSize.SMALL)] = 1.0
        with pytest.raises(TypeError):
            COLOR_NAMES["#123456"] = "Nope"

    def test_standard_colors(self):
        assert STANDARD_COLORS["BLACK"] == BLACK == RGBColor(0, 0, 0)
        assert STANDARD_COLORS["WHITE"] == WHITE == RGBColor(255, 255, 255)

    def test_color_names_use_canonical_hex(self):
        assert len(COLOR_NAMES) == 8
        for key in COLOR_NAMES:
            assert RGBColor.from_hex(key).hex == key

    def test_harmony_labels(self):
        assert Harmony.COMPLEMENTARY.label == "Complementary (high contrast)"
        assert Harmony.DISCORDANT.label == "Discordant (use with caution)"
