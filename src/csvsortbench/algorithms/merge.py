"""
Top-down merge sort.

Splits at the midpoint, sorts both halves recursively and merges through a
single auxiliary buffer allocated once for the whole series. Stable: on equal
keys the left run wins. Recursion depth is ceil(log2 n).
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

LABEL = "Merge Sort"

__all__ = ["LABEL", "sort"]


def sort(a: Sequence[float], *, config: Optional[Dict[str, Any]] = None) -> List[float]:
    arr = list(a)
    if len(arr) > 1:
        buf = [0.0] * len(arr)
        _sort_range(arr, buf, 0, len(arr) - 1)
    return arr


def _sort_range(arr: List[float], buf: List[float], lo: int, hi: int) -> None:
    if lo >= hi:
        return
    mid = (lo + hi) // 2
    _sort_range(arr, buf, lo, mid)
    _sort_range(arr, buf, mid + 1, hi)
    _merge(arr, buf, lo, mid, hi)


def _merge(arr: List[float], buf: List[float], lo: int, mid: int, hi: int) -> None:
    buf[lo:hi + 1] = arr[lo:hi + 1]
    i, j, k = lo, mid + 1, lo
    while i <= mid and j <= hi:
        if buf[i] <= buf[j]:
            arr[k] = buf[i]
            i += 1
        else:
            arr[k] = buf[j]
            j += 1
        k += 1
    while i <= mid:
        arr[k] = buf[i]
        i += 1
        k += 1
    # Remaining right-run elements are already in place.
