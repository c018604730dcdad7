# Copyright (c) 2026 Luvtone
# SPDX-License-Identifier: MIT

"""
HSLuv and HPLuv: bounded cylindrical forms of LCh(uv).

Both keep LCh's lightness and hue and rescale chroma against the sRGB
gamut boundary:
- HSLuv: S = 100 * C / (max chroma at this L and H)
- HPLuv: P = 100 * C / (max chroma at this L for any hue)

HSLuv reaches every sRGB color with S in [0, 100]. HPLuv never leaves
the gamut below P = 100 but cannot express the most saturated colors
without going past it.

References:
- https://www.hsluv.org/math/
"""

from __future__ import annotations

import numpy as np

from luvtone.schema import ColorLike, HPLuvColor, HSLuvColor, RGBColor, as_rgb, normalize_hue
from luvtone.convert.colorspace import lch_to_srgb, rgb_uint8_to_lch, srgb_to_device
from luvtone.convert.gamut import (
    L_MAX,
    L_MIN,
    max_chroma_for_lh,
    max_safe_chroma_for_l,
)


# =============================================================================
# LCh ↔ HSLuv / HPLuv
# =============================================================================


def lch_to_hsluv(L: float, C: float, H: float) -> tuple[float, float, float]:
    """
    Convert LCh(uv) to HSLuv.

    Returns:
        Tuple of (h, s, l). Saturation is 0 at L = 0 and L = 100.
    """
    if L >= L_MAX:
        return H, 0.0, 100.0
    if L <= L_MIN:
        return H, 0.0, 0.0
    max_chroma = max_chroma_for_lh(L, H)
    s = C / max_chroma * 100.0 if max_chroma > 0.0 else 0.0
    return H, s, L


def hsluv_to_lch(h: float, s: float, l: float) -> tuple[float, float, float]:
    """
    Convert HSLuv to LCh(uv).

    Returns:
        Tuple of (L, C, H). Hue is normalized into [0, 360).
    """
    h = normalize_hue(h)
    if l >= L_MAX:
        return 100.0, 0.0, h
    if l <= L_MIN:
        return 0.0, 0.0, h
    return l, max_chroma_for_lh(l, h) / 100.0 * s, h


def lch_to_hpluv(L: float, C: float, H: float) -> tuple[float, float, float]:
    """
    Convert LCh(uv) to HPLuv.

    Returns:
        Tuple of (h, p, l). Percent may exceed 100 for saturated colors.
    """
    if L >= L_MAX:
        return H, 0.0, 100.0
    if L <= L_MIN:
        return H, 0.0, 0.0
    max_chroma = max_safe_chroma_for_l(L)
    p = C / max_chroma * 100.0 if max_chroma > 0.0 else 0.0
    return H, p, L


def hpluv_to_lch(h: float, p: float, l: float) -> tuple[float, float, float]:
    """
    Convert HPLuv to LCh(uv).

    Returns:
        Tuple of (L, C, H). Hue is normalized into [0, 360).
    """
    h = normalize_hue(h)
    if l >= L_MAX:
        return 100.0, 0.0, h
    if l <= L_MIN:
        return 0.0, 0.0, h
    return l, max_safe_chroma_for_l(l) / 100.0 * p, h


# =============================================================================
# Device ↔ LCh
# =============================================================================


def rgb_to_lch(color: ColorLike) -> tuple[float, float, float]:
    """Convert a device color to (L, C, H) in LCh(uv)."""
    rgb = as_rgb(color)
    lch = rgb_uint8_to_lch(np.array(rgb.as_tuple(), dtype=np.float64))
    return float(lch[0]), float(lch[1]), float(lch[2])


def lch_to_rgb(L: float, C: float, H: float) -> RGBColor:
    """Convert LCh(uv) to a device color, clamping out-of-gamut channels."""
    r, g, b = srgb_to_device(lch_to_srgb(np.array([L, C, H], dtype=np.float64)))
    return RGBColor(int(r), int(g), int(b))


def _clamp(value: float, lo: float, hi: float) -> float:
    return lo if value < lo else hi if value > hi else value


# =============================================================================
# Device ↔ HSLuv / HPLuv
# =============================================================================


def rgb_to_hsluv(color: ColorLike) -> HSLuvColor:
    """
    Convert a device color to HSLuv.

    Args:
        color: RGBColor or hex string like "#3941C8"

    Returns:
        HSLuvColor. Black and white have s = 0 and l = 0 / 100.
    """
    h, s, l = lch_to_hsluv(*rgb_to_lch(color))
    # Float noise can push boundary colors a hair past the range
    return HSLuvColor(h=h, s=_clamp(s, 0.0, 100.0), l=_clamp(l, 0.0, 100.0))


def hsluv_to_rgb(color: HSLuvColor) -> RGBColor:
    """Convert HSLuv to a device color."""
    return lch_to_rgb(*hsluv_to_lch(color.h, color.s, color.l))


def rgb_to_hpluv(color: ColorLike) -> HPLuvColor:
    """
    Convert a device color to HPLuv.

    Args:
        color: RGBColor or hex string like "#3941C8"

    Returns:
        HPLuvColor. Percent is unbounded above for saturated colors.
    """
    h, p, l = lch_to_hpluv(*rgb_to_lch(color))
    return HPLuvColor(h=h, p=max(p, 0.0), l=_clamp(l, 0.0, 100.0))


def hpluv_to_rgb(color: HPLuvColor) -> RGBColor:
    """Convert HPLuv to a device color, clamping channels past the gamut."""
    return lch_to_rgb(*hpluv_to_lch(color.h, color.p, color.l))


# =============================================================================
# Convenience: hex ↔ HSLuv / HPLuv
# =============================================================================


def hex_to_hsluv(hex_color: str) -> HSLuvColor:
    """Convert a hex string like "#3941C8" to HSLuv."""
    return rgb_to_hsluv(RGBColor.from_hex(hex_color))


def hsluv_to_hex(h: float, s: float, l: float) -> str:
    """
    Convert HSLuv components to an uppercase hex string.

    Raises:
        InvalidColorInput: If s or l is outside 0-100
    """
    return hsluv_to_rgb(HSLuvColor(h=h, s=s, l=l)).hex


def hex_to_hpluv(hex_color: str) -> HPLuvColor:
    """Convert a hex string like "#3941C8" to HPLuv."""
    return rgb_to_hpluv(RGBColor.from_hex(hex_color))


def hpluv_to_hex(h: float, p: float, l: float) -> str:
    """
    Convert HPLuv components to an uppercase hex string.

    Raises:
        InvalidColorInput: If p is negative or l is outside 0-100
    """
    return hpluv_to_rgb(HPLuvColor(h=h, p=p, l=l)).hex
