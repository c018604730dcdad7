# Copyright (c) 2026 Luvtone
# SPDX-License-Identifier: MIT

"""
WCAG relative luminance and contrast.

References:
- WCAG 2.1, Success Criteria 1.4.3 (AA) and 1.4.6 (AAA)
- https://www.w3.org/TR/WCAG21/#dfn-relative-luminance
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from luvtone.schema import (
    BLACK,
    WCAG_CONTRAST_RATIOS,
    WHITE,
    ColorLike,
    RGBColor,
    TextSize,
    WCAGLevel,
    as_rgb,
    coerce_enum,
)
from luvtone.convert.colorspace import srgb_to_linear

# Rec. 709 luminance coefficients (the Y row of the sRGB → XYZ matrix)
_LUMINANCE_WEIGHTS = np.array([0.2126, 0.7152, 0.0722], dtype=np.float64)


def relative_luminance(color: ColorLike) -> float:
    """
    Relative luminance of a device color.

    Returns:
        0.0 for black through 1.0 for white
    """
    rgb = as_rgb(color)
    linear = srgb_to_linear(np.array(rgb.as_tuple(), dtype=np.float64) / 255.0)
    return float(linear @ _LUMINANCE_WEIGHTS)


def contrast_ratio(color1: ColorLike, color2: ColorLike) -> float:
    """
    WCAG contrast ratio between two colors, rounded to 2 decimals.

    Symmetric in its arguments. Ranges from 1.0 (identical luminance) to
    21.0 (black on white).
    """
    l1 = relative_luminance(color1)
    l2 = relative_luminance(color2)
    ratio = (max(l1, l2) + 0.05) / (min(l1, l2) + 0.05)
    return round(ratio, 2)


def required_ratio(
    level: WCAGLevel | str = WCAGLevel.AA,
    size: TextSize | str = TextSize.SMALL,
) -> float:
    """Minimum contrast ratio for a WCAG level and text size."""
    level = coerce_enum(WCAGLevel, level, "level")
    size = coerce_enum(TextSize, size, "size")
    return WCAG_CONTRAST_RATIOS[(level, size)]


def is_accessible(
    foreground: ColorLike,
    background: ColorLike,
    level: WCAGLevel | str = WCAGLevel.AA,
    size: TextSize | str = TextSize.SMALL,
) -> bool:
    """
    Check whether foreground text on background meets WCAG contrast.

    Args:
        foreground: Text color
        background: Background color
        level: "AA" or "AAA"
        size: "small" (normal text) or "large"

    Raises:
        InvalidColorInput: On malformed colors, level or size
    """
    threshold = required_ratio(level, size)
    return contrast_ratio(foreground, background) >= threshold


def suggest_text_color(
    background: ColorLike,
    level: WCAGLevel | str = WCAGLevel.AA,
) -> Optional[RGBColor]:
    """
    Pick black or white text for a background, using the normal-text threshold.

    Black wins only when it passes and beats white; otherwise white is
    returned if it passes.

    Returns:
        BLACK, WHITE, or None when neither reaches the threshold
    """
    threshold = required_ratio(level, TextSize.SMALL)
    black_contrast = contrast_ratio(background, BLACK)
    white_contrast = contrast_ratio(background, WHITE)

    if black_contrast >= threshold and black_contrast > white_contrast:
        return BLACK
    if white_contrast >= threshold:
        return WHITE
    return None
