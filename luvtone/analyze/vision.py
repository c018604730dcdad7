# Copyright (c) 2026 Luvtone
# SPDX-License-Identifier: MIT

"""
Dichromatic color vision simulation.

Applies a fixed 3x3 projection to device RGB channels. This is a coarse
approximation that works on gamma-encoded values, not a physiological
cone model; it is adequate for spotting colors that collapse together.

Each matrix row sums to 1 with non-negative weights, so results stay in
0-255. Output is clamped to that range regardless.
"""

from __future__ import annotations

from types import MappingProxyType

import numpy as np
from numpy.typing import ArrayLike, NDArray

from luvtone.schema import ColorLike, DichromacyType, RGBColor, as_rgb, coerce_enum
from luvtone.convert.colorspace import to_device_channels


def _frozen(rows: list[list[float]]) -> NDArray[np.float64]:
    matrix = np.array(rows, dtype=np.float64)
    matrix.flags.writeable = False
    return matrix


DICHROMACY_MATRICES = MappingProxyType({
    DichromacyType.PROTANOPIA: _frozen([
        [0.567, 0.433, 0.0],
        [0.558, 0.442, 0.0],
        [0.0, 0.242, 0.758],
    ]),
    DichromacyType.DEUTERANOPIA: _frozen([
        [0.625, 0.375, 0.0],
        [0.7, 0.3, 0.0],
        [0.0, 0.3, 0.7],
    ]),
    DichromacyType.TRITANOPIA: _frozen([
        [0.95, 0.05, 0.0],
        [0.0, 0.433, 0.567],
        [0.0, 0.475, 0.525],
    ]),
})


def simulate_dichromacy_pixels(
    pixels: ArrayLike,
    kind: DichromacyType | str,
) -> NDArray[np.int64]:
    """
    Simulate dichromacy over an array of device colors.

    Args:
        pixels: Array of shape (..., 3) with sRGB values [0, 255]
        kind: "protanopia", "deuteranopia" or "tritanopia"

    Returns:
        Integer array of the same shape, clamped to [0, 255]
    """
    matrix = DICHROMACY_MATRICES[coerce_enum(DichromacyType, kind, "type")]
    pixels = np.asarray(pixels, dtype=np.float64)
    return to_device_channels(np.einsum('...j,ij->...i', pixels, matrix))


def simulate_dichromacy(color: ColorLike, kind: DichromacyType | str) -> RGBColor:
    """How a single color appears under the given dichromacy."""
    rgb = as_rgb(color)
    r, g, b = simulate_dichromacy_pixels(rgb.as_tuple(), kind)
    return RGBColor(int(r), int(g), int(b))
