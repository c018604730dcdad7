# Copyright (c) 2026 Luvtone
# SPDX-License-Identifier: MIT

"""
Color space conversions.

Conversion chain: sRGB → Linear RGB → CIE XYZ → CIE LUV → LCh(uv)

References:
- sRGB: IEC 61966-2-1
- CIELUV: CIE 15:2004, D65 reference white
- Matrix constants: https://www.hsluv.org/ (reference implementation)

All conversions are pure NumPy and accept arrays of shape (..., 3).
Nothing here clips: out-of-gamut intermediates are needed intact by the
gamut boundary solver.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

from luvtone.schema.colors import parse_hex  # noqa: F401 (hex codec lives with RGBColor)


# =============================================================================
# Constants
# =============================================================================

# Linear sRGB to XYZ (D65)
M_RGB_TO_XYZ = np.array([
    [0.41239079926595, 0.35758433938387, 0.18048078840183],
    [0.21263900587151, 0.71516867876775, 0.072192315360733],
    [0.019330818715591, 0.11919477979462, 0.95053215224966],
], dtype=np.float64)

# XYZ to linear sRGB (D65)
M_XYZ_TO_RGB = np.array([
    [3.240969941904521, -1.537383177570093, -0.498610760293],
    [-0.96924363628087, 1.87596750150772, 0.041555057407175],
    [0.055630079696993, -0.20397695888897, 1.056971514242878],
], dtype=np.float64)

M_RGB_TO_XYZ.flags.writeable = False
M_XYZ_TO_RGB.flags.writeable = False

# D65 white point chromaticity (u', v') and luminance
REF_U = 0.19783000664283
REF_V = 0.46831999493879
REF_Y = 1.0

# CIE lightness constants: 216/24389 and 24389/27
EPSILON = 0.0088564516
KAPPA = 903.2962962

# Below this chroma the hue angle is meaningless
_ACHROMATIC_CHROMA = 1e-8


# =============================================================================
# sRGB ↔ Linear RGB
# =============================================================================


def srgb_to_linear(srgb: ArrayLike) -> NDArray[np.float64]:
    """
    Convert sRGB values [0,1] to linear RGB.

    sRGB uses a piecewise gamma curve:
    - For values <= 0.04045: linear/12.92
    - For values > 0.04045: ((value + 0.055) / 1.055) ^ 2.4
    """
    srgb = np.asarray(srgb, dtype=np.float64)
    magnitude = np.abs(srgb)
    linear = np.where(
        magnitude <= 0.04045,
        magnitude / 12.92,
        np.power((magnitude + 0.055) / 1.055, 2.4)
    )
    return np.copysign(linear, srgb)


def linear_to_srgb(linear: ArrayLike) -> NDArray[np.float64]:
    """
    Convert linear RGB to sRGB values.

    Inverse of srgb_to_linear. Values outside [0, 1] are encoded by odd
    symmetry rather than clipped.
    """
    linear = np.asarray(linear, dtype=np.float64)
    magnitude = np.abs(linear)
    srgb = np.where(
        magnitude <= 0.0031308,
        magnitude * 12.92,
        1.055 * np.power(magnitude, 1.0 / 2.4) - 0.055
    )
    return np.copysign(srgb, linear)


# =============================================================================
# Linear RGB ↔ XYZ
# =============================================================================


def linear_rgb_to_xyz(rgb: ArrayLike) -> NDArray[np.float64]:
    """
    Convert linear RGB to CIE XYZ (D65, Y of white = 1).

    Args:
        rgb: Array of shape (..., 3) with linear RGB values

    Returns:
        Array of shape (..., 3) with XYZ values
    """
    rgb = np.asarray(rgb, dtype=np.float64)
    return np.einsum('...j,ij->...i', rgb, M_RGB_TO_XYZ)


def xyz_to_linear_rgb(xyz: ArrayLike) -> NDArray[np.float64]:
    """
    Convert CIE XYZ to linear RGB.

    Args:
        xyz: Array of shape (..., 3) with XYZ values

    Returns:
        Array of shape (..., 3) with linear RGB values (unclipped)
    """
    xyz = np.asarray(xyz, dtype=np.float64)
    return np.einsum('...j,ij->...i', xyz, M_XYZ_TO_RGB)


# =============================================================================
# XYZ ↔ LUV
# =============================================================================


def y_to_l(Y: ArrayLike) -> NDArray[np.float64]:
    """CIE lightness from relative luminance Y (linear below EPSILON)."""
    Y = np.asarray(Y, dtype=np.float64) / REF_Y
    return np.where(Y <= EPSILON, Y * KAPPA, 116.0 * np.cbrt(Y) - 16.0)


def l_to_y(L: ArrayLike) -> NDArray[np.float64]:
    """Relative luminance Y from CIE lightness. Inverse of y_to_l."""
    L = np.asarray(L, dtype=np.float64)
    return REF_Y * np.where(L <= 8.0, L / KAPPA, ((L + 16.0) / 116.0) ** 3)


def xyz_to_luv(xyz: ArrayLike) -> NDArray[np.float64]:
    """
    Convert CIE XYZ to CIE LUV.

    Args:
        xyz: Array of shape (..., 3) with XYZ values

    Returns:
        Array of shape (..., 3) with LUV values (L, u*, v*).
        Black (L = 0) maps to (0, 0, 0).
    """
    xyz = np.asarray(xyz, dtype=np.float64)
    X = xyz[..., 0]
    Y = xyz[..., 1]
    Z = xyz[..., 2]

    divider = X + 15.0 * Y + 3.0 * Z
    degenerate = divider == 0.0
    safe_divider = np.where(degenerate, 1.0, divider)

    # Chromaticity coordinates
    var_u = 4.0 * X / safe_divider
    var_v = 9.0 * Y / safe_divider

    L = y_to_l(Y)
    black = degenerate | (L == 0.0)
    U = np.where(black, 0.0, 13.0 * L * (var_u - REF_U))
    V = np.where(black, 0.0, 13.0 * L * (var_v - REF_V))

    return np.stack([L, U, V], axis=-1)


def luv_to_xyz(luv: ArrayLike) -> NDArray[np.float64]:
    """
    Convert CIE LUV to CIE XYZ.

    Args:
        luv: Array of shape (..., 3) with LUV values (L, u*, v*)

    Returns:
        Array of shape (..., 3) with XYZ values. L <= 0 maps to (0, 0, 0).
    """
    luv = np.asarray(luv, dtype=np.float64)
    L = luv[..., 0]
    U = luv[..., 1]
    V = luv[..., 2]

    black = L <= 0.0
    safe_L = np.where(black, 1.0, L)

    var_u = U / (13.0 * safe_L) + REF_U
    var_v = V / (13.0 * safe_L) + REF_V

    Y = l_to_y(L)
    with np.errstate(divide="ignore", invalid="ignore"):
        X = 9.0 * Y * var_u / (4.0 * var_v)
        Z = (9.0 * Y - 15.0 * var_v * Y - var_v * X) / (3.0 * var_v)

    X = np.where(black, 0.0, X)
    Y = np.where(black, 0.0, Y)
    Z = np.where(black, 0.0, Z)

    return np.stack([X, Y, Z], axis=-1)


# =============================================================================
# LUV ↔ LCh(uv)
# =============================================================================


def luv_to_lch(luv: ArrayLike) -> NDArray[np.float64]:
    """
    Convert LUV to polar LCh (cylindrical coordinates).

    Args:
        luv: Array of shape (..., 3) with LUV values (L, u*, v*)

    Returns:
        Array of shape (..., 3) with LCh values (L, C, H).
        H is in degrees [0, 360), and 0 for achromatic colors.
    """
    luv = np.asarray(luv, dtype=np.float64)

    L = luv[..., 0]
    U = luv[..., 1]
    V = luv[..., 2]

    C = np.hypot(U, V)
    H = np.degrees(np.arctan2(V, U)) % 360.0
    H = np.where((C < _ACHROMATIC_CHROMA) | (H >= 360.0), 0.0, H)

    return np.stack([L, C, H], axis=-1)


def lch_to_luv(lch: ArrayLike) -> NDArray[np.float64]:
    """
    Convert polar LCh to LUV.

    Args:
        lch: Array of shape (..., 3) with LCh values (L, C, H in degrees)

    Returns:
        Array of shape (..., 3) with LUV values (L, u*, v*)
    """
    lch = np.asarray(lch, dtype=np.float64)

    L = lch[..., 0]
    C = lch[..., 1]
    H_rad = np.radians(lch[..., 2])

    U = C * np.cos(H_rad)
    V = C * np.sin(H_rad)

    return np.stack([L, U, V], axis=-1)


# =============================================================================
# Convenience: sRGB ↔ LCh (full chain)
# =============================================================================


def srgb_to_lch(srgb: ArrayLike) -> NDArray[np.float64]:
    """
    Convert sRGB [0,1] to LCh(uv).

    Full chain: sRGB → Linear RGB → XYZ → LUV → LCh

    Returns:
        Array of shape (..., 3) with LCh values (L, C, H)
        - L: Lightness [0, 100]
        - C: Chroma [0, ~180 for sRGB gamut]
        - H: Hue in degrees [0, 360)
    """
    linear = srgb_to_linear(srgb)
    xyz = linear_rgb_to_xyz(linear)
    luv = xyz_to_luv(xyz)
    return luv_to_lch(luv)


def lch_to_srgb(lch: ArrayLike) -> NDArray[np.float64]:
    """
    Convert LCh(uv) to sRGB.

    Full chain: LCh → LUV → XYZ → Linear RGB → sRGB

    Values are NOT clipped; use to_device_channels for display output.
    """
    luv = lch_to_luv(lch)
    xyz = luv_to_xyz(luv)
    linear = xyz_to_linear_rgb(xyz)
    return linear_to_srgb(linear)


def rgb_uint8_to_lch(pixels: ArrayLike) -> NDArray[np.float64]:
    """
    Convert device sRGB channels [0,255] to LCh(uv).

    Args:
        pixels: Array of shape (..., 3) with sRGB values [0, 255]

    Returns:
        Array of shape (..., 3) with LCh values
    """
    srgb_float = np.asarray(pixels, dtype=np.float64) / 255.0
    return srgb_to_lch(srgb_float)


# =============================================================================
# Device Channels and Hex
# =============================================================================


def round_half_up(values: ArrayLike) -> NDArray[np.float64]:
    """Round to nearest integer with .5 going up (not banker's rounding)."""
    return np.floor(np.asarray(values, dtype=np.float64) + 0.5)


def to_device_channels(values: ArrayLike) -> NDArray[np.int64]:
    """
    Clamp device channel values to [0, 255] and round to integers.

    Args:
        values: Array of shape (..., 3) on the 0-255 scale

    Returns:
        Integer array of the same shape
    """
    clipped = np.clip(np.asarray(values, dtype=np.float64), 0.0, 255.0)
    return round_half_up(clipped).astype(np.int64)


def srgb_to_device(srgb: ArrayLike) -> NDArray[np.int64]:
    """Convert sRGB [0,1] (possibly out of gamut) to clamped 0-255 integers."""
    return to_device_channels(np.asarray(srgb, dtype=np.float64) * 255.0)


def rgb_to_hex(rgb: ArrayLike) -> str:
    """
    Format device channels as an uppercase hex string.

    Channels are clamped to [0, 255] and rounded half-up first.

    Returns:
        Hex color string like "#3941C8"
    """
    r, g, b = to_device_channels(rgb)
    return f"#{int(r):02X}{int(g):02X}{int(b):02X}"
