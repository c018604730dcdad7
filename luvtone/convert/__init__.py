# Copyright (c) 2026 Luvtone
# SPDX-License-Identifier: MIT

"""
Conversion core for Luvtone.

Device RGB ↔ Linear RGB ↔ XYZ ↔ LUV ↔ LCh ↔ HSLuv / HPLuv, plus CMYK.
All operations are pure functions of their inputs.
"""

from luvtone.convert.cmyk import cmyk_to_rgb, rgb_to_cmyk
from luvtone.convert.colorspace import parse_hex, rgb_to_hex
from luvtone.convert.gamut import max_chroma_for_lh, max_safe_chroma_for_l
from luvtone.convert.hsluv import (
    hex_to_hpluv,
    hex_to_hsluv,
    hpluv_to_hex,
    hpluv_to_rgb,
    hsluv_to_hex,
    hsluv_to_rgb,
    rgb_to_hpluv,
    rgb_to_hsluv,
)

__all__ = [
    "parse_hex",
    "rgb_to_hex",
    "rgb_to_hsluv",
    "hsluv_to_rgb",
    "rgb_to_hpluv",
    "hpluv_to_rgb",
    "hex_to_hsluv",
    "hsluv_to_hex",
    "hex_to_hpluv",
    "hpluv_to_hex",
    "rgb_to_cmyk",
    "cmyk_to_rgb",
    "max_chroma_for_lh",
    "max_safe_chroma_for_l",
]
