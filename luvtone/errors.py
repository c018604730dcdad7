# Copyright (c) 2026 Luvtone
# SPDX-License-Identifier: MIT

"""Exceptions raised by Luvtone."""

from __future__ import annotations

from typing import Any


class InvalidColorInput(ValueError):
    """
    Malformed input rejected before any conversion runs.

    Attributes:
        field: Name of the offending parameter (e.g. "hex", "s", "level")
        value: The value that was rejected
        expected: Human-readable description of the accepted range or format
    """

    def __init__(self, field: str, value: Any, expected: str) -> None:
        self.field = field
        self.value = value
        self.expected = expected
        super().__init__(f"Invalid {field}: {value!r} (expected {expected})")
