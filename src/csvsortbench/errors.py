"""
Error kinds raised by the extraction/sorting core.

All of them derive from `SortBenchError` (itself a `ValueError`) so the
request boundary can tell a client mistake apart from an unexpected failure.
"""

from __future__ import annotations

from typing import Sequence

__all__ = [
    "SortBenchError",
    "MalformedInput",
    "ColumnNotFound",
    "NonNumericValue",
    "EmptyNumericColumn",
]


class SortBenchError(ValueError):
    """Base class for every recoverable, request-scoped failure."""


class MalformedInput(SortBenchError):
    """Too few CSV lines or an unparsable request body."""


class ColumnNotFound(SortBenchError):
    def __init__(self, column: str, available: Sequence[str]) -> None:
        self.column = column
        self.available = list(available)
        super().__init__(
            f"Column '{column}' not found. Available columns: [{', '.join(self.available)}]"
        )


class NonNumericValue(SortBenchError):
    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Non-numeric value found: '{value}'")


class EmptyNumericColumn(SortBenchError):
    def __init__(self, column: str) -> None:
        self.column = column
        super().__init__(f"No numeric data found in column: {column}")
