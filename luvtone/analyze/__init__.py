# Copyright (c) 2026 Luvtone
# SPDX-License-Identifier: MIT

"""
Analysis built on the conversion core.

Contrast and accessibility, harmony and temperature, scheme generation,
gradients and dichromacy simulation.
"""

from luvtone.analyze.contrast import (
    contrast_ratio,
    is_accessible,
    relative_luminance,
    suggest_text_color,
)
from luvtone.analyze.gradient import linear_gradient, mix_colors, shade, tint
from luvtone.analyze.harmony import color_name, evaluate_harmony, temperature
from luvtone.analyze.schemes import (
    adjust_lightness,
    adjust_saturation,
    analogous,
    complementary,
    monochromatic,
    tetradic,
    triadic,
)
from luvtone.analyze.vision import simulate_dichromacy

__all__ = [
    # Contrast
    "relative_luminance",
    "contrast_ratio",
    "is_accessible",
    "suggest_text_color",
    # Harmony
    "evaluate_harmony",
    "temperature",
    "color_name",
    # Schemes
    "complementary",
    "monochromatic",
    "analogous",
    "triadic",
    "tetradic",
    "adjust_lightness",
    "adjust_saturation",
    # Gradients
    "mix_colors",
    "tint",
    "shade",
    "linear_gradient",
    # Vision
    "simulate_dichromacy",
]
