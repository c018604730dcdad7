# Copyright (c) 2026 Luvtone
# SPDX-License-Identifier: MIT

"""
Color value records and constant tables.

Design principles:
- Immutable: All records are frozen dataclasses
- Validated: Malformed values are rejected on construction
- Serializable: Every record round-trips through a plain dict

Color models:
- RGBColor: 8-bit device sRGB, the canonical representation
- HSLuvColor: Hue / Saturation / Lightness where S=100 is the sRGB gamut
  boundary at that specific hue and lightness
- HPLuvColor: Hue / Percent / Lightness where P=100 is the largest chroma
  available at that lightness for every hue (P may exceed 100)
- CMYKColor: Subtractive Cyan / Magenta / Yellow / Key, each 0-1

Hue (0-360): ≈12=red, ≈86=yellow, ≈128=green, ≈266=blue, ≈308=purple (HSLuv)
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, TypeVar, Union

from luvtone.errors import InvalidColorInput


# =============================================================================
# Helpers
# =============================================================================


def normalize_hue(h: float) -> float:
    """Wrap a hue in degrees into [0, 360). Non-finite hues become 0."""
    h = float(h)
    if not math.isfinite(h):
        return 0.0
    h = h % 360.0
    # -1e-20 % 360 rounds to 360.0
    return 0.0 if h >= 360.0 else h


def check_range(field: str, value: Any, lo: float, hi: float) -> float:
    """Return value as a finite float, rejecting anything outside [lo, hi]."""
    if math.isinf(hi):
        expected = f"a number >= {lo:g}"
    else:
        expected = f"a number between {lo:g} and {hi:g}"
    try:
        v = float(value)
    except (TypeError, ValueError):
        raise InvalidColorInput(field, value, expected) from None
    if not (math.isfinite(v) and lo <= v <= hi):
        raise InvalidColorInput(field, value, expected)
    return v


def check_int(field: str, value: Any, lo: int, hi: float = math.inf) -> int:
    """Return value as an int, rejecting bools, fractions and out-of-range values."""
    if math.isinf(hi):
        expected = f"an integer >= {lo}"
    else:
        expected = f"an integer between {lo} and {int(hi)}"
    if isinstance(value, bool):
        raise InvalidColorInput(field, value, expected)
    try:
        v = float(value)
    except (TypeError, ValueError):
        raise InvalidColorInput(field, value, expected) from None
    if not (lo <= v <= hi and v.is_integer()):
        raise InvalidColorInput(field, value, expected)
    return int(v)


def _check_channel(field: str, value: Any) -> int:
    return check_int(field, value, 0, 255)


_HEX_RE = re.compile(r"#?([0-9A-Fa-f]{6})")


def parse_hex(hex_color: str) -> tuple[int, int, int]:
    """
    Parse a hex color string into device channels.

    Args:
        hex_color: "#RRGGBB" or "RRGGBB", case-insensitive

    Returns:
        Tuple of (r, g, b) integers in [0, 255]

    Raises:
        InvalidColorInput: If the string is not six hex digits
    """
    if not isinstance(hex_color, str):
        raise InvalidColorInput("hex", hex_color, "a #RRGGBB string")
    m = _HEX_RE.fullmatch(hex_color.strip())
    if not m:
        raise InvalidColorInput("hex", hex_color, "a #RRGGBB string")
    digits = m.group(1)
    return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)


# =============================================================================
# Device Color
# =============================================================================


@dataclass(frozen=True, slots=True)
class RGBColor:
    """
    An 8-bit device sRGB color.

    Attributes:
        r: Red channel (0-255)
        g: Green channel (0-255)
        b: Blue channel (0-255)
    """
    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        """Validate channels are integers in 0-255."""
        for name in ("r", "g", "b"):
            object.__setattr__(self, name, _check_channel(name, getattr(self, name)))

    @property
    def hex(self) -> str:
        """Uppercase hex string like "#3941C8"."""
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    @classmethod
    def from_hex(cls, hex_color: str) -> RGBColor:
        """Parse "#RRGGBB" or "RRGGBB" (case-insensitive)."""
        return cls(*parse_hex(hex_color))

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"r": self.r, "g": self.g, "b": self.b}

    @classmethod
    def from_dict(cls, data: dict) -> RGBColor:
        """Deserialize from dictionary."""
        return cls(r=data["r"], g=data["g"], b=data["b"])


ColorLike = Union[RGBColor, str]


def as_rgb(color: ColorLike) -> RGBColor:
    """Accept an RGBColor or a hex string and return an RGBColor."""
    if isinstance(color, RGBColor):
        return color
    return RGBColor.from_hex(color)


# =============================================================================
# Perceptual Cylindrical Colors
# =============================================================================


@dataclass(frozen=True, slots=True)
class HSLuvColor:
    """
    A color in HSLuv (uniform saturation) space.

    Attributes:
        h: Hue in degrees, normalized into [0, 360) on construction
        s: Saturation (0 = gray, 100 = gamut boundary at this hue)
        l: Lightness (0 = black, 100 = white)
    """
    h: float
    s: float
    l: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "h", normalize_hue(self.h))
        object.__setattr__(self, "s", check_range("s", self.s, 0.0, 100.0))
        object.__setattr__(self, "l", check_range("l", self.l, 0.0, 100.0))

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"h": self.h, "s": self.s, "l": self.l}

    @classmethod
    def from_dict(cls, data: dict) -> HSLuvColor:
        """Deserialize from dictionary."""
        return cls(h=data["h"], s=data["s"], l=data["l"])


@dataclass(frozen=True, slots=True)
class HPLuvColor:
    """
    A color in HPLuv (uniform chroma boundary) space.

    Percent is relative to the chroma every hue can reach at this lightness,
    so saturated colors legitimately report p > 100.

    Attributes:
        h: Hue in degrees, normalized into [0, 360) on construction
        p: Percent (>= 0)
        l: Lightness (0 = black, 100 = white)
    """
    h: float
    p: float
    l: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "h", normalize_hue(self.h))
        object.__setattr__(self, "p", check_range("p", self.p, 0.0, math.inf))
        object.__setattr__(self, "l", check_range("l", self.l, 0.0, 100.0))

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"h": self.h, "p": self.p, "l": self.l}

    @classmethod
    def from_dict(cls, data: dict) -> HPLuvColor:
        """Deserialize from dictionary."""
        return cls(h=data["h"], p=data["p"], l=data["l"])


@dataclass(frozen=True, slots=True)
class CMYKColor:
    """
    A subtractive CMYK color. All components are fractions in 0-1.

    After black extraction at least one of c, m, y is 0; pure black is
    (0, 0, 0, 1).
    """
    c: float
    m: float
    y: float
    k: float

    def __post_init__(self) -> None:
        for name in ("c", "m", "y", "k"):
            object.__setattr__(self, name, check_range(name, getattr(self, name), 0.0, 1.0))

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"c": self.c, "m": self.m, "y": self.y, "k": self.k}

    @classmethod
    def from_dict(cls, data: dict) -> CMYKColor:
        """Deserialize from dictionary."""
        return cls(c=data["c"], m=data["m"], y=data["y"], k=data["k"])


# =============================================================================
# Enumerations
# =============================================================================

_E = TypeVar("_E", bound=Enum)


def coerce_enum(enum_cls: type[_E], value: Any, field: str) -> _E:
    """Accept an enum member or its string value; reject anything else."""
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(repr(m.value) for m in enum_cls)
        raise InvalidColorInput(field, value, f"one of {allowed}") from None


class WCAGLevel(Enum):
    """WCAG conformance level."""
    AA = "AA"
    AAA = "AAA"


class TextSize(Enum):
    """Text size class used to pick the WCAG threshold."""
    LARGE = "large"
    SMALL = "small"


class DichromacyType(Enum):
    """Dichromatic color vision deficiency."""
    PROTANOPIA = "protanopia"
    DEUTERANOPIA = "deuteranopia"
    TRITANOPIA = "tritanopia"


class Harmony(Enum):
    """Relationship between two hues."""
    ANALOGOUS = "Analogous"
    COMPLEMENTARY = "Complementary"
    TRIADIC = "Triadic"
    SQUARE = "Square"
    DISCORDANT = "Discordant"

    @property
    def label(self) -> str:
        """Human-readable description, e.g. "Triadic (balanced)"."""
        return _HARMONY_LABELS[self]


_HARMONY_LABELS = {
    Harmony.ANALOGOUS: "Analogous (harmonious)",
    Harmony.COMPLEMENTARY: "Complementary (high contrast)",
    Harmony.TRIADIC: "Triadic (balanced)",
    Harmony.SQUARE: "Square (vibrant)",
    Harmony.DISCORDANT: "Discordant (use with caution)",
}


class Temperature(Enum):
    """Perceived color temperature."""
    WARM = "Warm"
    COOL = "Cool"


# =============================================================================
# Constant Tables
# =============================================================================

WCAG_CONTRAST_RATIOS = MappingProxyType({
    (WCAGLevel.AA, TextSize.SMALL): 4.5,
    (WCAGLevel.AA, TextSize.LARGE): 3.0,
    (WCAGLevel.AAA, TextSize.SMALL): 7.0,
    (WCAGLevel.AAA, TextSize.LARGE): 4.5,
})

BLACK = RGBColor(0, 0, 0)
WHITE = RGBColor(255, 255, 255)

STANDARD_COLORS = MappingProxyType({
    "BLACK": BLACK,
    "WHITE": WHITE,
})

COLOR_NAMES = MappingProxyType({
    "#FF0000": "Red",
    "#00FF00": "Lime",
    "#0000FF": "Blue",
    "#FFFF00": "Yellow",
    "#FF00FF": "Magenta",
    "#00FFFF": "Cyan",
    "#000000": "Black",
    "#FFFFFF": "White",
})
