"""
Request body decoding.

Bodies are marker-delimited text, split on every "###" (extra parts are
ignored, each part is trimmed):

    /sort, /column:   <csv-text>###<column-selector>
    /sort-values:     <sort-type>###<column-index>###[v1, v2, ...]

Decoders return typed requests so nothing past this module sees a marker.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from csvsortbench.algorithms import AlgoSpec, resolve_algorithm
from csvsortbench.errors import MalformedInput
from csvsortbench.table import parse_index, parse_value_list

__all__ = [
    "MARKER",
    "BENCHMARK_SORT_TYPES",
    "ColumnRequest",
    "SortValuesRequest",
    "split_body",
    "decode_column_request",
    "decode_sort_values_request",
]

MARKER = "###"
BENCHMARK_SORT_TYPES = frozenset({"all", "benchmark", "compare"})


@dataclass(frozen=True)
class ColumnRequest:
    csv_text: str
    selector: str


@dataclass(frozen=True)
class SortValuesRequest:
    algorithm: Optional[AlgoSpec]  # None means run the full benchmark
    column: int
    values: List[float]

    @property
    def benchmark(self) -> bool:
        return self.algorithm is None


def split_body(body: str, expected: int, shape: str) -> List[str]:
    parts = body.split(MARKER)
    if len(parts) < expected:
        raise MalformedInput(f"Invalid request format. Expected: {shape}")
    return [p.strip() for p in parts[:expected]]


def decode_column_request(body: str) -> ColumnRequest:
    csv_text, selector = split_body(body, 2, "CSV###COLUMN")
    return ColumnRequest(csv_text=csv_text, selector=selector)


def decode_sort_values_request(body: str) -> SortValuesRequest:
    sort_type, column, values = split_body(body, 3, "SORT_TYPE###COLUMN_INDEX###[v1, v2, ...]")
    if sort_type.lower() in BENCHMARK_SORT_TYPES:
        algo = None
    else:
        try:
            algo = resolve_algorithm(sort_type)
        except KeyError:
            raise MalformedInput(f"Unknown sort type: '{sort_type}'") from None
    return SortValuesRequest(
        algorithm=algo,
        column=parse_index(column),
        values=parse_value_list(values),
    )
