"""
Minimal delimited-text tokenizer.

Splits a text blob into rows of fields. There is no quoting or escaping:
a literal comma inside a field cannot be represented.

Conventions:
- Lines end in "\\n" or "\\r\\n"; blank (whitespace-only) lines are dropped.
- Trailing empty fields are dropped, so "1,2," has two fields. Interior
  empty fields are kept.
- Rows may be shorter than the header; they are never padded.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List

from csvsortbench.errors import MalformedInput

__all__ = ["CsvTable", "parse_csv", "split_row"]

_LINE_BREAK = re.compile(r"\r\n|\n")


@dataclass(frozen=True)
class CsvTable:
    header: List[str]
    rows: List[List[str]]

    @property
    def column_names(self) -> List[str]:
        return [name.strip() for name in self.header]


def split_row(line: str) -> List[str]:
    fields = line.split(",")
    while fields and fields[-1] == "":
        fields.pop()
    return fields


def parse_csv(text: str) -> CsvTable:
    """
    Parse `text` into a header row plus data rows.

    Raises
    ------
    MalformedInput
        If fewer than two non-blank lines are present.
    """
    rows = [split_row(line) for line in _LINE_BREAK.split(text) if line.strip()]
    if len(rows) < 2:
        raise MalformedInput("CSV must have header and at least one data row")
    return CsvTable(header=rows[0], rows=rows[1:])
