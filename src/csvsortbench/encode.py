"""
Response body encoding.

Every body is a single flat JSON object. Field order is fixed so output is
reproducible:

    benchmark:    {"executionTimes": {<label>: n, ...}, "bestAlgorithm": "...", "bestTime": n}
    direct sort:  {"column": i, "algorithm": "...", "sortedValues": [...], "executionTime": n}
    extraction:   {"column": i, "values": [...]}
    error:        {"error": "..."}

Timings appear in declaration order. Strings are quoted with interior double
quotes backslash-escaped; numbers are plain decimal literals with no exponent,
so a returned series can be posted back as-is.
"""

from __future__ import annotations

import json
import math
from typing import Any, Dict, Optional, Sequence

import numpy as np

from csvsortbench.bench.harness import AlgorithmResult, BenchmarkReport

__all__ = ["encode_report", "encode_sorted", "encode_values", "encode_error"]


def _decimal(x: float) -> str:
    if not math.isfinite(x):
        raise ValueError(f"Cannot encode non-finite value: {x!r}")
    # Shortest round-tripping digits, never an exponent: 1e20 -> "100000000000000000000.0".
    return np.format_float_positional(x, unique=True, trim="0")


def _dumps(value: Any) -> str:
    if isinstance(value, bool) or value is None:
        return json.dumps(value)
    if isinstance(value, float):
        return _decimal(value)
    if isinstance(value, int):
        return str(value)
    if isinstance(value, str):
        return json.dumps(value, ensure_ascii=False)
    if isinstance(value, dict):
        return "{" + ", ".join(f"{_dumps(str(k))}: {_dumps(v)}" for k, v in value.items()) + "}"
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(_dumps(v) for v in value) + "]"
    raise TypeError(f"Cannot encode {type(value).__name__}")


def encode_report(report: BenchmarkReport) -> str:
    if report.winner is None:
        raise ValueError("Cannot encode a benchmark report without results")
    return _dumps(
        {
            "executionTimes": report.timings(),
            "bestAlgorithm": report.winner.label,
            "bestTime": report.winner.elapsed,
        }
    )


def encode_sorted(result: AlgorithmResult, column: Optional[int] = None) -> str:
    payload: Dict[str, Any] = {}
    if column is not None:
        payload["column"] = column
    payload["algorithm"] = result.label
    payload["sortedValues"] = list(result.sorted_values or [])
    payload["executionTime"] = result.elapsed
    return _dumps(payload)


def encode_values(values: Sequence[float], column: int) -> str:
    return _dumps({"column": column, "values": list(values)})


def encode_error(message: str) -> str:
    return _dumps({"error": message})
