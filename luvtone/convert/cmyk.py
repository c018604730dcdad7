# Copyright (c) 2026 Luvtone
# SPDX-License-Identifier: MIT

"""
Device RGB ↔ CMYK.

Naive (profile-free) conversion with full black extraction. CMYK spends
four numbers on a three-dimensional space, so only RGB → CMYK → RGB is
lossless up to rounding.
"""

from __future__ import annotations

from luvtone.schema import CMYKColor, ColorLike, RGBColor, as_rgb
from luvtone.convert.colorspace import round_half_up


def rgb_to_cmyk(color: ColorLike) -> CMYKColor:
    """
    Convert a device color to CMYK.

    Pure black short-circuits to (0, 0, 0, 1).

    Args:
        color: RGBColor or hex string

    Returns:
        CMYKColor with unrounded components
    """
    rgb = as_rgb(color)
    c = 1.0 - rgb.r / 255.0
    m = 1.0 - rgb.g / 255.0
    y = 1.0 - rgb.b / 255.0
    k = min(c, m, y)

    if k == 1.0:
        return CMYKColor(c=0.0, m=0.0, y=0.0, k=1.0)

    return CMYKColor(
        c=(c - k) / (1.0 - k),
        m=(m - k) / (1.0 - k),
        y=(y - k) / (1.0 - k),
        k=k,
    )


def cmyk_to_rgb(color: CMYKColor) -> RGBColor:
    """Convert CMYK to a device color, rounding each channel half-up."""
    r, g, b = round_half_up([
        255.0 * (1.0 - color.c) * (1.0 - color.k),
        255.0 * (1.0 - color.m) * (1.0 - color.k),
        255.0 * (1.0 - color.y) * (1.0 - color.k),
    ])
    return RGBColor(int(r), int(g), int(b))
