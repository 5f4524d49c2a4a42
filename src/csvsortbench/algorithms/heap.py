"""
Heap sort: build a max-heap in place, then move the root to the tail.

Sift-down is recursive; its depth is bounded by the heap height. Not stable.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

LABEL = "Heap Sort"

__all__ = ["LABEL", "sort"]


def sort(a: Sequence[float], *, config: Optional[Dict[str, Any]] = None) -> List[float]:
    arr = list(a)
    n = len(arr)
    for i in range(n // 2 - 1, -1, -1):
        _sift_down(arr, n, i)
    for end in range(n - 1, 0, -1):
        arr[0], arr[end] = arr[end], arr[0]
        _sift_down(arr, end, 0)
    return arr


def _sift_down(arr: List[float], size: int, i: int) -> None:
    largest = i
    left = 2 * i + 1
    right = left + 1
    if left < size and arr[left] > arr[largest]:
        largest = left
    if right < size and arr[right] > arr[largest]:
        largest = right
    if largest != i:
        arr[i], arr[largest] = arr[largest], arr[i]
        _sift_down(arr, size, largest)
