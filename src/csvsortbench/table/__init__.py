"""
Tabular ingestion public API.

Re-export the tokenizer, column resolution and numeric extraction so callers
can write:
    from csvsortbench.table import parse_csv, resolve_by_name, extract_strict
"""

from .columns import ColumnRef, parse_index, resolve_by_index, resolve_by_name
from .csv_table import CsvTable, parse_csv
from .extract import extract_lenient, extract_strict, parse_number, parse_value_list

__all__ = [
    "CsvTable",
    "parse_csv",
    "ColumnRef",
    "parse_index",
    "resolve_by_name",
    "resolve_by_index",
    "parse_number",
    "extract_strict",
    "extract_lenient",
    "parse_value_list",
]
