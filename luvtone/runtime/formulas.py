# Copyright (c) 2026 Luvtone
# SPDX-License-Identifier: MIT

"""
Named formula table for host integrations.

Each formula is a plain function registered under a stable name with a
one-line description. Hosts (spreadsheet formula engines, tool-calling
models, RPC layers) look formulas up by name, pass positional arguments
and receive JSON-ready results: hex strings, numbers, booleans, flat
dicts or lists of hex strings.

Host-level limits (scheme sizes, gradient lengths, hue ranges) are
applied here rather than in the conversion core, and are configurable
through FormulaLimits.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Optional

from luvtone.schema import CMYKColor, HPLuvColor, HSLuvColor, RGBColor, check_int, check_range
from luvtone.convert.cmyk import cmyk_to_rgb, rgb_to_cmyk
from luvtone.convert.hsluv import hex_to_hpluv, hex_to_hsluv, hpluv_to_rgb, hsluv_to_rgb
from luvtone.analyze import contrast, gradient, harmony, schemes, vision

logger = logging.getLogger(__name__)

NO_CONTRASTING_COLOR = "No sufficiently contrasting color found"


@dataclass(frozen=True)
class FormulaLimits:
    """Host-level argument limits applied before any conversion runs."""

    # Scheme sizes (MonochromaticScheme, AnalogousScheme)
    min_scheme_count: int = 1
    max_scheme_count: int = 20

    # Hue step for AnalogousScheme, in degrees
    min_angle: float = 1.0
    max_angle: float = 180.0

    # Gradient length (LinearGradient)
    min_steps: int = 2
    max_steps: int = 100

    # Upper bound for HPLuv percent accepted from hosts
    max_percent: float = 100.0

    # Decimal places for HSLuv / HPLuv / CMYK components in results
    decimals: int = 2


@dataclass(frozen=True)
class Formula:
    """A named, documented entry point."""

    name: str
    description: str
    func: Callable[..., Any]


_REGISTRY: dict[str, Formula] = {}


def _formula(name: str, description: str):
    """Register the decorated function under `name`."""
    def register(func: Callable[..., Any]) -> Callable[..., Any]:
        _REGISTRY[name] = Formula(name=name, description=description, func=func)
        return func
    return register


def _round(value: float, limits: FormulaLimits) -> float:
    return round(value, limits.decimals)


def _hex_list(colors: tuple[RGBColor, ...]) -> list[str]:
    return [c.hex for c in colors]


# =============================================================================
# Conversion
# =============================================================================


@_formula("HexToRgb", "Convert Hex to RGB")
def _hex_to_rgb(limits: FormulaLimits, hex_color: str) -> dict:
    return RGBColor.from_hex(hex_color).to_dict()


@_formula("RgbToHex", "Convert RGB to Hex")
def _rgb_to_hex(limits: FormulaLimits, r: int, g: int, b: int) -> str:
    return RGBColor(r, g, b).hex


@_formula("HexToHsluv", "Convert Hex to HSLuv")
def _hex_to_hsluv(limits: FormulaLimits, hex_color: str) -> dict:
    hsl = hex_to_hsluv(hex_color)
    return {k: _round(v, limits) for k, v in hsl.to_dict().items()}


@_formula("HsluvToHex", "Convert HSLuv to Hex")
def _hsluv_to_hex(limits: FormulaLimits, h: float, s: float, l: float) -> str:
    h = check_range("h", h, 0.0, 360.0)
    return hsluv_to_rgb(HSLuvColor(h=h, s=s, l=l)).hex


@_formula("HexToHpluv", "Convert Hex to HPLuv")
def _hex_to_hpluv(limits: FormulaLimits, hex_color: str) -> dict:
    hpl = hex_to_hpluv(hex_color)
    return {k: _round(v, limits) for k, v in hpl.to_dict().items()}


@_formula("HpluvToHex", "Convert HPLuv to Hex")
def _hpluv_to_hex(limits: FormulaLimits, h: float, p: float, l: float) -> str:
    h = check_range("h", h, 0.0, 360.0)
    p = check_range("p", p, 0.0, limits.max_percent)
    return hpluv_to_rgb(HPLuvColor(h=h, p=p, l=l)).hex


@_formula("ComplementaryColor", "Generate a complementary color")
def _complementary(limits: FormulaLimits, hex_color: str) -> str:
    return schemes.complementary(hex_color).hex


@_formula("RGBToCMYK", "Convert RGB values to CMYK values")
def _rgb_to_cmyk(limits: FormulaLimits, r: int, g: int, b: int) -> dict:
    cmyk = rgb_to_cmyk(RGBColor(r, g, b))
    return {k: _round(v, limits) for k, v in cmyk.to_dict().items()}


@_formula("CMYKToRGB", "Convert CMYK values to RGB values")
def _cmyk_to_rgb(limits: FormulaLimits, c: float, m: float, y: float, k: float) -> dict:
    return cmyk_to_rgb(CMYKColor(c=c, m=m, y=y, k=k)).to_dict()


# =============================================================================
# Analysis
# =============================================================================


@_formula("ContrastRatio", "Calculate the contrast ratio between two colors")
def _contrast_ratio(limits: FormulaLimits, color1: str, color2: str) -> float:
    return contrast.contrast_ratio(color1, color2)


@_formula(
    "IsAccessible",
    "Check if a text color is accessible on a given background color according to WCAG guidelines",
)
def _is_accessible(
    limits: FormulaLimits,
    foreground: str,
    background: str,
    level: str,
    size: str,
) -> bool:
    return contrast.is_accessible(foreground, background, level, size)


@_formula(
    "SuggestTextColor",
    "Suggest an accessible text color for a given background color based on WCAG guidelines",
)
def _suggest_text_color(limits: FormulaLimits, background: str, level: str) -> str:
    suggestion = contrast.suggest_text_color(background, level)
    return suggestion.hex if suggestion is not None else NO_CONTRASTING_COLOR


@_formula("ColorName", "Get the name of a color")
def _color_name(limits: FormulaLimits, color: str) -> str:
    return harmony.color_name(color)


@_formula("IsWarmOrCool", "Determine if a color is warm or cool")
def _is_warm_or_cool(limits: FormulaLimits, color: str) -> str:
    return harmony.temperature(color).value


@_formula("EvaluateColorHarmony", "Evaluate the harmony of a color combination")
def _evaluate_harmony(limits: FormulaLimits, color1: str, color2: str) -> str:
    return harmony.evaluate_harmony(color1, color2).label


# =============================================================================
# Schemes
# =============================================================================


@_formula("MonochromaticScheme", "Generate a monochromatic color scheme")
def _monochromatic(limits: FormulaLimits, base_color: str, count: int) -> list[str]:
    count = check_int("count", count, limits.min_scheme_count, limits.max_scheme_count)
    return _hex_list(schemes.monochromatic(base_color, count))


@_formula("AnalogousScheme", "Generate an analogous color scheme")
def _analogous(
    limits: FormulaLimits,
    base_color: str,
    count: int,
    angle: float = 30.0,
) -> list[str]:
    count = check_int("count", count, limits.min_scheme_count, limits.max_scheme_count)
    angle = check_range("angle", angle, limits.min_angle, limits.max_angle)
    return _hex_list(schemes.analogous(base_color, count, angle))


@_formula("TriadicScheme", "Generate a triadic color scheme")
def _triadic(limits: FormulaLimits, base_color: str) -> list[str]:
    return _hex_list(schemes.triadic(base_color))


@_formula("TetradicScheme", "Generate a tetradic (rectangle) color scheme")
def _tetradic(limits: FormulaLimits, base_color: str) -> list[str]:
    return _hex_list(schemes.tetradic(base_color))


# =============================================================================
# Manipulation
# =============================================================================


@_formula("AdjustBrightness", "Adjust the brightness of a color")
def _adjust_brightness(limits: FormulaLimits, color: str, adjustment: float) -> str:
    return schemes.adjust_lightness(color, adjustment).hex


@_formula("AdjustSaturation", "Adjust the saturation of a color")
def _adjust_saturation(limits: FormulaLimits, color: str, adjustment: float) -> str:
    return schemes.adjust_saturation(color, adjustment).hex


@_formula("MixColors", "Mix two colors with a given ratio")
def _mix_colors(limits: FormulaLimits, color1: str, color2: str, ratio: float) -> str:
    return gradient.mix_colors(color1, color2, ratio).hex


@_formula("Tint", "Create a tint of a color (mix with white)")
def _tint(limits: FormulaLimits, color: str, amount: float) -> str:
    return gradient.tint(color, amount).hex


@_formula("Shade", "Create a shade of a color (mix with black)")
def _shade(limits: FormulaLimits, color: str, amount: float) -> str:
    return gradient.shade(color, amount).hex


@_formula("SimulateColorBlindness", "Simulate how a color appears to people with color blindness")
def _simulate_color_blindness(limits: FormulaLimits, color: str, kind: str) -> str:
    return vision.simulate_dichromacy(color, kind).hex


@_formula("LinearGradient", "Generate a linear gradient between two colors")
def _linear_gradient(limits: FormulaLimits, color1: str, color2: str, steps: int) -> list[str]:
    steps = check_int("steps", steps, limits.min_steps, limits.max_steps)
    return _hex_list(gradient.linear_gradient(color1, color2, steps))


FORMULAS: MappingProxyType[str, Formula] = MappingProxyType(dict(_REGISTRY))


def get_formula(name: str) -> Formula:
    """
    Look up a formula by name.

    Raises:
        KeyError: If no formula has that name
    """
    try:
        return FORMULAS[name]
    except KeyError:
        raise KeyError(f"Unknown formula: {name!r}") from None


def call_formula(name: str, *args: Any, limits: Optional[FormulaLimits] = None) -> Any:
    """
    Run a formula by name with positional arguments.

    Args:
        name: Registered formula name, e.g. "HexToHsluv"
        *args: Formula arguments in declaration order
        limits: Host-level argument limits (uses defaults if None)

    Returns:
        JSON-ready result

    Raises:
        KeyError: If no formula has that name
        InvalidColorInput: If any argument is malformed or out of range

    Example:
        >>> call_formula("HexToRgb", "#3941C8")
        {'r': 57, 'g': 65, 'b': 200}
    """
    formula = get_formula(name)
    logger.debug("Calling formula %s with %d argument(s)", name, len(args))
    return formula.func(limits or FormulaLimits(), *args)
