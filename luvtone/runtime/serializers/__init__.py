# Copyright (c) 2026 Luvtone
# SPDX-License-Identifier: MIT

"""
Serializers for formula results.

Serializers wrap a result for delivery to a host without changing it.
"""

from luvtone.runtime.serializers.base import SerializerFormat
from luvtone.runtime.serializers.tool import run_tool, to_tool_output

__all__ = [
    "SerializerFormat",
    "to_tool_output",
    "run_tool",
]
