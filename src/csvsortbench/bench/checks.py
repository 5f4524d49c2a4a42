"""
Post-run output checks for `validate=True` benchmarks.

A sorted output must be ascending and hold exactly the values of the series
it came from. A failure means an algorithm is broken, not that the request
was bad, so it surfaces as an AssertionError (a 500 at the service boundary).
"""

from __future__ import annotations

from collections import Counter
from typing import Optional, Sequence

__all__ = ["first_descent", "check_sort_output"]


def first_descent(xs: Sequence[float]) -> Optional[int]:
    """Index i of the first xs[i] > xs[i+1], or None if xs is ascending."""
    for i in range(len(xs) - 1):
        if xs[i] > xs[i + 1]:
            return i
    return None


def check_sort_output(label: str, series: Sequence[float], out: Sequence[float]) -> None:
    i = first_descent(out)
    if i is not None:
        raise AssertionError(f"{label} output not ascending at i={i}: {out[i]} > {out[i + 1]}")
    # 0.0 and -0.0 hash alike, so they count as one value here.
    if len(out) != len(series) or Counter(out) != Counter(series):
        raise AssertionError(f"{label} output holds different values than its {len(series)}-value input")
