# Copyright (c) 2026 Luvtone
# SPDX-License-Identifier: MIT

"""
sRGB gamut boundary in the LUV chroma plane.

At a fixed lightness L, each face of the RGB cube (one channel pinned at
0 or 1) is a plane in XYZ. Projected into the u*v* plane it becomes a
straight line, giving six lines that together enclose the displayable
colors at that lightness. The white point sits at the origin.

Two queries are answered from those lines:
- max_chroma_for_lh: how far a ray at hue H travels from the origin
  before it crosses the first line (HSLuv's 100% saturation)
- max_safe_chroma_for_l: radius of the largest origin-centred disc that
  fits inside all six lines (HPLuv's 100%, valid for every hue)

Lines depend only on L, so they are cached per lightness value.
"""

from __future__ import annotations

import logging
import math
from functools import lru_cache
from typing import Optional

import numpy as np
from numpy.typing import NDArray

from luvtone.convert.colorspace import EPSILON, KAPPA, M_XYZ_TO_RGB

logger = logging.getLogger(__name__)

# Lightness values at or beyond these have no chroma room at all
L_MIN = 1e-8
L_MAX = 99.9999999

# Ray/line denominators smaller than this are treated as parallel
_PARALLEL_TOLERANCE = 1e-12


def is_extreme_lightness(L: float) -> bool:
    """True at the black and white tips of the gamut, where chroma is 0."""
    return L <= L_MIN or L >= L_MAX


@lru_cache(maxsize=1024)
def get_bounds(L: float) -> NDArray[np.float64]:
    """
    Compute the six gamut boundary lines at lightness L.

    Row order is (R=0, R=1, G=0, G=1, B=0, B=1). Each row is
    (slope, intercept) of the line v* = slope * u* + intercept.

    The returned array is shared between callers and is read-only.

    Args:
        L: CIE lightness in (0, 100)

    Returns:
        Array of shape (6, 2)
    """
    L = float(L)
    sub1 = (L + 16.0) ** 3 / 1560896.0
    sub2 = sub1 if sub1 > EPSILON else L / KAPPA

    m1 = np.repeat(M_XYZ_TO_RGB[:, 0], 2)
    m2 = np.repeat(M_XYZ_TO_RGB[:, 1], 2)
    m3 = np.repeat(M_XYZ_TO_RGB[:, 2], 2)
    t = np.tile([0.0, 1.0], 3)

    top1 = (284517.0 * m1 - 94839.0 * m3) * sub2
    top2 = (838422.0 * m3 + 769860.0 * m2 + 731718.0 * m1) * L * sub2 - 769860.0 * t * L
    bottom = (632260.0 * m3 - 126452.0 * m2) * sub2 + 126452.0 * t

    with np.errstate(divide="ignore", invalid="ignore"):
        bounds = np.stack([top1 / bottom, top2 / bottom], axis=-1)
    bounds.flags.writeable = False
    return bounds


def ray_length_until_intersect(
    theta: float,
    slope: float,
    intercept: float,
) -> Optional[float]:
    """
    Distance from the origin along a ray at angle theta to a line.

    Args:
        theta: Ray angle in radians
        slope: Line slope in the u*v* plane
        intercept: Line intercept in the u*v* plane

    Returns:
        Non-negative distance, or None when the ray runs parallel to the
        line or meets it behind the origin.
    """
    denominator = math.sin(theta) - slope * math.cos(theta)
    if not math.isfinite(denominator) or abs(denominator) < _PARALLEL_TOLERANCE:
        return None
    length = intercept / denominator
    if not math.isfinite(length) or length < 0.0:
        return None
    return length


def distance_from_origin(slope: float, intercept: float) -> float:
    """Perpendicular distance from the origin to v* = slope * u* + intercept."""
    return abs(intercept) / math.sqrt(slope * slope + 1.0)


def max_chroma_for_lh(L: float, H: float) -> float:
    """
    Largest in-gamut chroma at lightness L and hue H.

    Args:
        L: CIE lightness [0, 100]
        H: Hue in degrees (any value; only the angle matters)

    Returns:
        Boundary chroma, exactly 0 at L = 0 and L = 100
    """
    if is_extreme_lightness(L):
        return 0.0

    theta = math.radians(H)
    candidates: list[float] = []
    for slope, intercept in get_bounds(L):
        length = ray_length_until_intersect(theta, float(slope), float(intercept))
        if length is not None:
            candidates.append(length)

    if not candidates:
        logger.debug("No gamut boundary hit at L=%s H=%s; using chroma 0", L, H)
        return 0.0
    return min(candidates)


def max_safe_chroma_for_l(L: float) -> float:
    """
    Largest chroma that is in gamut at lightness L for every hue.

    Args:
        L: CIE lightness [0, 100]

    Returns:
        Hue-independent boundary chroma, exactly 0 at L = 0 and L = 100
    """
    if is_extreme_lightness(L):
        return 0.0

    distances = [
        distance_from_origin(slope, intercept)
        for slope, intercept in get_bounds(L)
        if math.isfinite(slope) and math.isfinite(intercept)
    ]
    if not distances:
        logger.debug("No finite gamut boundary at L=%s; using chroma 0", L)
        return 0.0
    return min(distances)
