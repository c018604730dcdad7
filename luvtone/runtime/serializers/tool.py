# Copyright (c) 2026 Luvtone
# SPDX-License-Identifier: MIT

"""
Tool output serializer for function-calling hosts.

Formats a formula result as a tool/function result that can be returned
to models supporting tool use, or to any host that speaks JSON.
"""

from __future__ import annotations

import json
from typing import Any, Optional

from luvtone.runtime.formulas import FormulaLimits, call_formula, get_formula
from luvtone.runtime.serializers.base import SerializerFormat


def to_tool_output(
    name: str,
    result: Any,
    *,
    format: SerializerFormat = SerializerFormat.JSON,
) -> str:
    """Serialize a formula result as tool output JSON.

    Args:
        name: Formula that produced the result (must be registered).
        result: The JSON-ready value returned by the formula.
        format: Output format (JSON or JSON_PRETTY).

    Returns:
        JSON string suitable for tool output.

    Example::

        {
          "tool": "luvtone_formula",
          "formula": "HexToHsluv",
          "description": "Convert Hex to HSLuv",
          "result": { "h": 12.18, "s": 100.0, "l": 53.24 }
        }
    """
    formula = get_formula(name)
    data = {
        "tool": "luvtone_formula",
        "formula": formula.name,
        "description": formula.description,
        "result": result,
    }

    if format == SerializerFormat.JSON_PRETTY:
        return json.dumps(data, indent=2)
    else:
        return json.dumps(data, separators=(",", ":"))


def run_tool(
    name: str,
    *args: Any,
    format: SerializerFormat = SerializerFormat.JSON,
    limits: Optional[FormulaLimits] = None,
) -> str:
    """Call a formula and serialize its result in one step."""
    return to_tool_output(name, call_formula(name, *args, limits=limits), format=format)
