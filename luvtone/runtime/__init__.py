# Copyright (c) 2026 Luvtone
# SPDX-License-Identifier: MIT

"""
Host integration runtime for Luvtone.

A named formula table plus serializers for handing results back to
formula engines and tool-calling models. The runtime never changes what
the conversion core computes; it only validates host arguments and
shapes results.
"""

from luvtone.runtime.formulas import (
    FORMULAS,
    Formula,
    FormulaLimits,
    call_formula,
    get_formula,
)
from luvtone.runtime.serializers import SerializerFormat, run_tool, to_tool_output

__all__ = [
    "FORMULAS",
    "Formula",
    "FormulaLimits",
    "call_formula",
    "get_formula",
    "to_tool_output",
    "run_tool",
    "SerializerFormat",
]
