# Copyright (c) 2026 Luvtone
# SPDX-License-Identifier: MIT

"""
Color scheme generation in HSLuv space.

Hue rotations keep HSLuv saturation and lightness, so every member of a
scheme sits at the same relative distance from the gamut edge and at the
same perceived lightness. The base color is always returned first and
unchanged.
"""

from __future__ import annotations

from luvtone.schema import ColorLike, HSLuvColor, RGBColor, as_rgb, check_int, check_range
from luvtone.convert.hsluv import hsluv_to_rgb, rgb_to_hsluv


def _rotate(base: HSLuvColor, degrees: float) -> RGBColor:
    return hsluv_to_rgb(HSLuvColor(h=base.h + degrees, s=base.s, l=base.l))


def _clamp(value: float) -> float:
    return min(100.0, max(0.0, value))


def complementary(base: ColorLike) -> RGBColor:
    """The color opposite base on the HSLuv hue circle."""
    return _rotate(rgb_to_hsluv(base), 180.0)


def monochromatic(base: ColorLike, count: int) -> tuple[RGBColor, ...]:
    """
    Sweep lightness at the base hue and saturation.

    Args:
        base: Base color
        count: Number of colors. 1 keeps the base lightness; otherwise
            lightness runs evenly from 0 to 100 inclusive.

    Returns:
        Tuple of `count` colors, darkest first
    """
    count = check_int("count", count, 1)
    hsl = rgb_to_hsluv(base)

    if count == 1:
        return (hsluv_to_rgb(hsl),)

    return tuple(
        hsluv_to_rgb(HSLuvColor(h=hsl.h, s=hsl.s, l=100.0 * i / (count - 1)))
        for i in range(count)
    )


def analogous(base: ColorLike, count: int, angle: float = 30.0) -> tuple[RGBColor, ...]:
    """
    Step around the hue circle from base by a fixed angle.

    Args:
        base: Base color (first element of the result)
        count: Number of colors
        angle: Hue step in degrees between neighbours

    Returns:
        Tuple of `count` colors at hues base, base+angle, base+2*angle, ...
    """
    count = check_int("count", count, 1)
    angle = check_range("angle", angle, -360.0, 360.0)
    rgb = as_rgb(base)
    hsl = rgb_to_hsluv(rgb)
    return (rgb,) + tuple(_rotate(hsl, angle * i) for i in range(1, count))


def triadic(base: ColorLike) -> tuple[RGBColor, RGBColor, RGBColor]:
    """Base plus the two colors 120° and 240° around the hue circle."""
    rgb = as_rgb(base)
    hsl = rgb_to_hsluv(rgb)
    return (rgb, _rotate(hsl, 120.0), _rotate(hsl, 240.0))


def tetradic(base: ColorLike) -> tuple[RGBColor, RGBColor, RGBColor, RGBColor]:
    """Rectangle scheme: base plus rotations of 60°, 180° and 240°."""
    rgb = as_rgb(base)
    hsl = rgb_to_hsluv(rgb)
    return (rgb, _rotate(hsl, 60.0), _rotate(hsl, 180.0), _rotate(hsl, 240.0))


def adjust_lightness(color: ColorLike, adjustment: float) -> RGBColor:
    """Shift HSLuv lightness by `adjustment` (-100 to 100), clamped to 0-100."""
    adjustment = check_range("adjustment", adjustment, -100.0, 100.0)
    hsl = rgb_to_hsluv(color)
    return hsluv_to_rgb(HSLuvColor(h=hsl.h, s=hsl.s, l=_clamp(hsl.l + adjustment)))


def adjust_saturation(color: ColorLike, adjustment: float) -> RGBColor:
    """Shift HSLuv saturation by `adjustment` (-100 to 100), clamped to 0-100."""
    adjustment = check_range("adjustment", adjustment, -100.0, 100.0)
    hsl = rgb_to_hsluv(color)
    return hsluv_to_rgb(HSLuvColor(h=hsl.h, s=_clamp(hsl.s + adjustment), l=hsl.l))
