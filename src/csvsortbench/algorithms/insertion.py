"""
Insertion sort: shift each element left into the sorted prefix.

Stable. O(n^2) worst case, O(n) on already-sorted input.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

LABEL = "Insertion Sort"

__all__ = ["LABEL", "sort"]


def sort(a: Sequence[float], *, config: Optional[Dict[str, Any]] = None) -> List[float]:
    arr = list(a)
    for i in range(1, len(arr)):
        key = arr[i]
        j = i - 1
        while j >= 0 and arr[j] > key:
            arr[j + 1] = arr[j]
            j -= 1
        arr[j + 1] = key
    return arr
