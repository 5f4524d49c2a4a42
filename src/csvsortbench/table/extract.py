"""
Numeric extraction from a resolved column.

Two policies are supported and deliberately differ:

- strict  (column chosen by name): any cell that is not a plain decimal
  literal aborts with NonNumericValue, and an empty result raises
  EmptyNumericColumn.
- lenient (column chosen by index): unparsable cells and rows too short to
  reach the column are skipped; an empty result is returned as-is.

In both policies a row shorter than the column position contributes nothing.
Values are parsed to 64-bit floats without rounding; a literal too large for
float64 counts as unparsable. Only `-?digits[.digits]` and `-?.digits` are
accepted: no exponent, sign "+", NaN, infinity or locale grouping, so only
finite values reach the sorting stage.
"""

from __future__ import annotations

import math
import re
from typing import List, Optional

from csvsortbench.errors import EmptyNumericColumn, NonNumericValue
from csvsortbench.table.columns import ColumnRef
from csvsortbench.table.csv_table import CsvTable

__all__ = ["parse_number", "extract_strict", "extract_lenient", "parse_value_list"]

_DECIMAL = re.compile(r"-?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")


def parse_number(text: str) -> Optional[float]:
    """Return the float value of a trimmed decimal literal, or None."""
    raw = text.strip()
    if _DECIMAL.fullmatch(raw) is None:
        return None
    value = float(raw)
    # Literals beyond float64 range overflow to inf.
    if math.isinf(value):
        return None
    return value


def extract_strict(table: CsvTable, column: ColumnRef) -> List[float]:
    out: List[float] = []
    pos = column.position
    for row in table.rows:
        if pos >= len(row):
            continue
        cell = row[pos].strip()
        value = parse_number(cell)
        if value is None:
            raise NonNumericValue(cell)
        out.append(value)
    if not out:
        raise EmptyNumericColumn(column.label)
    return out


def extract_lenient(table: CsvTable, column: ColumnRef) -> List[float]:
    out: List[float] = []
    pos = column.position
    for row in table.rows:
        if pos >= len(row):
            continue
        value = parse_number(row[pos])
        if value is not None:
            out.append(value)
    return out


def parse_value_list(text: str) -> List[float]:
    """
    Parse a textual array such as "[3, 1.5, x, 2]" leniently.

    Brackets are stripped, entries are split on commas, and malformed
    entries are dropped: the example yields [3.0, 1.5, 2.0].
    """
    body = text.strip()
    if body.startswith("["):
        body = body[1:]
    if body.endswith("]"):
        body = body[:-1]
    out: List[float] = []
    for entry in body.split(","):
        value = parse_number(entry)
        if value is not None:
            out.append(value)
    return out
