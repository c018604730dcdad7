# Copyright (c) 2026 Luvtone
# SPDX-License-Identifier: MIT

"""
Luvtone -- Perceptual color conversion and analysis.

Converts between device RGB/hex, CMYK, HSLuv and HPLuv, and builds
contrast checks, harmony classification, schemes, gradients and
dichromacy simulation on top.

Quick start::

    from luvtone import RGBColor, rgb_to_hsluv, triadic

    red = RGBColor.from_hex("#FF0000")
    rgb_to_hsluv(red)                 # HSLuvColor(h=12.17..., s=100.0, l=53.23...)
    [c.hex for c in triadic(red)]     # base plus two 120° rotations
"""

from __future__ import annotations

__version__ = "1.0.0"

from luvtone.errors import InvalidColorInput
from luvtone.schema import (
    CMYKColor,
    DichromacyType,
    Harmony,
    HPLuvColor,
    HSLuvColor,
    RGBColor,
    Temperature,
    TextSize,
    WCAGLevel,
)
from luvtone.convert import (
    cmyk_to_rgb,
    hpluv_to_rgb,
    hsluv_to_rgb,
    parse_hex,
    rgb_to_cmyk,
    rgb_to_hex,
    rgb_to_hpluv,
    rgb_to_hsluv,
)
from luvtone.analyze import (
    analogous,
    contrast_ratio,
    evaluate_harmony,
    is_accessible,
    linear_gradient,
    monochromatic,
    relative_luminance,
    simulate_dichromacy,
    temperature,
    tetradic,
    triadic,
)

__all__ = [
    # Types
    "RGBColor",
    "HSLuvColor",
    "HPLuvColor",
    "CMYKColor",
    "WCAGLevel",
    "TextSize",
    "DichromacyType",
    "Harmony",
    "Temperature",
    "InvalidColorInput",
    # Conversion
    "parse_hex",
    "rgb_to_hex",
    "rgb_to_hsluv",
    "hsluv_to_rgb",
    "rgb_to_hpluv",
    "hpluv_to_rgb",
    "rgb_to_cmyk",
    "cmyk_to_rgb",
    # Analysis
    "relative_luminance",
    "contrast_ratio",
    "is_accessible",
    "evaluate_harmony",
    "temperature",
    "monochromatic",
    "analogous",
    "triadic",
    "tetradic",
    "linear_gradient",
    "simulate_dichromacy",
    # Version
    "__version__",
]
