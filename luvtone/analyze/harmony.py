# Copyright (c) 2026 Luvtone
# SPDX-License-Identifier: MIT

"""Hue relationships, color temperature and color names (HSLuv hue space)."""

from __future__ import annotations

from luvtone.schema import COLOR_NAMES, ColorLike, Harmony, Temperature, as_rgb
from luvtone.convert.hsluv import rgb_to_hsluv

# Half-width of each harmony band, in degrees
HARMONY_TOLERANCE = 30.0

# HSLuv hues in [30, 210] read as cool
COOL_HUE_RANGE = (30.0, 210.0)


def hue_difference(h1: float, h2: float) -> float:
    """Circular distance between two hues in degrees, in [0, 180]."""
    diff = abs(h1 - h2) % 360.0
    return 360.0 - diff if diff > 180.0 else diff


def classify_hue_difference(diff: float) -> Harmony:
    """
    Classify a circular hue distance.

    Bands are checked in order (analogous, complementary, triadic, square),
    so overlapping bands resolve to the earlier one.
    """
    if diff < HARMONY_TOLERANCE:
        return Harmony.ANALOGOUS
    if abs(diff - 180.0) < HARMONY_TOLERANCE:
        return Harmony.COMPLEMENTARY
    if abs(diff - 120.0) < HARMONY_TOLERANCE:
        return Harmony.TRIADIC
    if abs(diff - 90.0) < HARMONY_TOLERANCE:
        return Harmony.SQUARE
    return Harmony.DISCORDANT


def evaluate_harmony(color1: ColorLike, color2: ColorLike) -> Harmony:
    """Classify the hue relationship between two colors."""
    h1 = rgb_to_hsluv(color1).h
    h2 = rgb_to_hsluv(color2).h
    return classify_hue_difference(hue_difference(h1, h2))


def temperature(color: ColorLike) -> Temperature:
    """Warm or cool, judged by HSLuv hue rather than raw RGB hue."""
    h = rgb_to_hsluv(color).h
    lo, hi = COOL_HUE_RANGE
    return Temperature.COOL if lo <= h <= hi else Temperature.WARM


def color_name(color: ColorLike) -> str:
    """Common name for the eight primary/secondary/neutral colors, else "Unknown"."""
    return COLOR_NAMES.get(as_rgb(color).hex, "Unknown")
