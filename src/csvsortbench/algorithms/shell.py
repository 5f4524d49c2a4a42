"""
Shell sort with the halving gap sequence n/2, n/4, ..., 1.

Each pass is a gapped insertion sort. Not stable.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

LABEL = "Shell Sort"

__all__ = ["LABEL", "sort"]


def sort(a: Sequence[float], *, config: Optional[Dict[str, Any]] = None) -> List[float]:
    arr = list(a)
    n = len(arr)
    gap = n // 2
    while gap > 0:
        for i in range(gap, n):
            tmp = arr[i]
            j = i
            while j >= gap and arr[j - gap] > tmp:
                arr[j] = arr[j - gap]
                j -= gap
            arr[j] = tmp
        gap //= 2
    return arr
