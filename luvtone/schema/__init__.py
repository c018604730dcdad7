# Copyright (c) 2026 Luvtone
# SPDX-License-Identifier: MIT

"""
Schema definitions for color values.

All types in this module are immutable (frozen dataclasses) and validate
their fields on construction.
"""

from luvtone.schema.colors import (
    BLACK,
    COLOR_NAMES,
    STANDARD_COLORS,
    WCAG_CONTRAST_RATIOS,
    WHITE,
    CMYKColor,
    DichromacyType,
    Harmony,
    HPLuvColor,
    HSLuvColor,
    RGBColor,
    Temperature,
    TextSize,
    WCAGLevel,
    ColorLike,
    as_rgb,
    check_int,
    check_range,
    coerce_enum,
    normalize_hue,
    parse_hex,
)

__all__ = [
    # Color records
    "RGBColor",
    "HSLuvColor",
    "HPLuvColor",
    "CMYKColor",
    # Enumerations
    "WCAGLevel",
    "TextSize",
    "DichromacyType",
    "Harmony",
    "Temperature",
    # Constant tables
    "WCAG_CONTRAST_RATIOS",
    "STANDARD_COLORS",
    "COLOR_NAMES",
    "BLACK",
    "WHITE",
    # Helpers
    "normalize_hue",
    "parse_hex",
    "ColorLike",
    "as_rgb",
    "check_int",
    "check_range",
    "coerce_enum",
]
