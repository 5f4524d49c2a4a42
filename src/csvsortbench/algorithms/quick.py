"""
Quick sort with a Lomuto partition around the last element.

Both sides of each partition are sorted; the smaller side by recursion and
the larger side by looping, which bounds the Python stack at O(log n) even on
the sorted/reversed inputs that drive the comparison count to O(n^2).
Not stable.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

LABEL = "Quick Sort"

__all__ = ["LABEL", "sort", "partition"]


def sort(a: Sequence[float], *, config: Optional[Dict[str, Any]] = None) -> List[float]:
    arr = list(a)
    _quick(arr, 0, len(arr) - 1)
    return arr


def _quick(arr: List[float], lo: int, hi: int) -> None:
    while lo < hi:
        p = partition(arr, lo, hi)
        if p - lo < hi - p:
            _quick(arr, lo, p - 1)
            lo = p + 1
        else:
            _quick(arr, p + 1, hi)
            hi = p - 1


def partition(arr: List[float], lo: int, hi: int) -> int:
    """Partition arr[lo..hi] around arr[hi]; return the pivot's final index."""
    pivot = arr[hi]
    i = lo - 1
    for j in range(lo, hi):
        if arr[j] <= pivot:
            i += 1
            arr[i], arr[j] = arr[j], arr[i]
    arr[i + 1], arr[hi] = arr[hi], arr[i + 1]
    return i + 1
