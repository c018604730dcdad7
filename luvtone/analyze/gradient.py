# Copyright (c) 2026 Luvtone
# SPDX-License-Identifier: MIT

"""
Mixing and gradients in device RGB.

Interpolation is done on raw 0-255 channels (not linear light, not a
perceptual space), matching what CSS gradients and most design tools do
by default.
"""

from __future__ import annotations

import numpy as np

from luvtone.schema import BLACK, WHITE, ColorLike, RGBColor, as_rgb, check_int, check_range
from luvtone.convert.colorspace import to_device_channels


def _channels(color: ColorLike) -> np.ndarray:
    return np.array(as_rgb(color).as_tuple(), dtype=np.float64)


def mix_colors(color1: ColorLike, color2: ColorLike, ratio: float) -> RGBColor:
    """
    Blend two colors channel by channel.

    Args:
        color1: Color at ratio 0
        color2: Color at ratio 1
        ratio: Weight of color2 (0-1)
    """
    ratio = check_range("ratio", ratio, 0.0, 1.0)
    mixed = _channels(color1) * (1.0 - ratio) + _channels(color2) * ratio
    r, g, b = to_device_channels(mixed)
    return RGBColor(int(r), int(g), int(b))


def tint(color: ColorLike, amount: float) -> RGBColor:
    """Mix toward white by `amount` (0-1)."""
    return mix_colors(color, WHITE, amount)


def shade(color: ColorLike, amount: float) -> RGBColor:
    """Mix toward black by `amount` (0-1)."""
    return mix_colors(color, BLACK, amount)


def linear_gradient(start: ColorLike, end: ColorLike, steps: int) -> tuple[RGBColor, ...]:
    """
    Evenly spaced colors from start to end, both inclusive.

    Every step is computed independently from the endpoints, so the first
    and last entries equal start and end exactly.

    Args:
        start: First color
        end: Last color
        steps: Number of colors (>= 2)

    Returns:
        Tuple of `steps` colors
    """
    steps = check_int("steps", steps, 2)
    a = _channels(start)
    b = _channels(end)

    ratios = np.linspace(0.0, 1.0, steps)[:, np.newaxis]
    channels = to_device_channels(a * (1.0 - ratios) + b * ratios)

    return tuple(RGBColor(int(r), int(g), int(b_)) for r, g, b_ in channels)
