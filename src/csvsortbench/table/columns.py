"""
Column selection: map a name or a zero-based index to a field position.

Name lookups scan the header left to right, compare trimmed names
case-insensitively and return the first match. Index lookups are not checked
against the header width; short rows are dealt with during extraction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from csvsortbench.errors import ColumnNotFound, MalformedInput
from csvsortbench.table.csv_table import CsvTable

__all__ = ["ColumnRef", "resolve_by_name", "resolve_by_index", "parse_index"]


@dataclass(frozen=True)
class ColumnRef:
    position: int
    name: Optional[str] = None

    @property
    def label(self) -> str:
        return self.name if self.name is not None else str(self.position)


def resolve_by_name(table: CsvTable, name: str) -> ColumnRef:
    wanted = name.strip().lower()
    for i, field in enumerate(table.header):
        if field.strip().lower() == wanted:
            return ColumnRef(position=i, name=name)
    raise ColumnNotFound(name, table.column_names)


def resolve_by_index(index: Union[int, str]) -> ColumnRef:
    if isinstance(index, str):
        index = parse_index(index)
    if index < 0:
        raise MalformedInput(f"Column index must be nonnegative; got {index}")
    return ColumnRef(position=index)


def parse_index(text: str) -> int:
    raw = text.strip()
    if not raw.isascii() or not raw.isdigit():
        raise MalformedInput(f"Column index must be a nonnegative integer; got {raw!r}")
    return int(raw)
