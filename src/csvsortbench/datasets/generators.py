"""
Synthetic numeric series for offline benchmarking.

Currently implemented:
- dist == "random":
    Floats drawn uniformly from the half-open range [lo, hi).

- dist == "nearly_sorted":
    Start from [0.0, 1.0, ..., n-1] then perform ceil(swap_frac * n) random
    index swaps using the provided RNG.

- dist == "few_uniques":
    Choose k distinct values, then fill the series by sampling among them.
    Useful for exercising the equal-key paths of every algorithm.

- dist == "reversed":
    Deterministic [n-1, n-2, ..., 0] as floats. This is the worst case for
    insertion sort and for the last-element-pivot quick sort.

Public API (stable):
    make_series(n: int, spec: dict, rng: numpy.random.Generator) -> list[float]

Conventions:
- Returns a plain Python `list[float]` (algorithms stay NumPy-agnostic).
- The caller supplies the RNG (for reproducibility across runs).
"""

from __future__ import annotations

from typing import Any, Dict, List, Tuple

import numpy as np

SUPPORTED_DISTS = {
    "random",
    "nearly_sorted",
    "few_uniques",
    "reversed",
}
__all__ = ["SUPPORTED_DISTS", "make_series"]


def make_series(n: int, spec: Dict[str, Any], rng: np.random.Generator) -> List[float]:
    """
    Generate a float series according to `spec`, using the provided RNG.

    Parameters
    ----------
    n : int
        Number of elements to generate. Must be >= 0.
    spec : dict
        Distribution specification, e.g.
            {"dist": "random", "params": {"range": [-1000.0, 1000.0]}}
            {"dist": "nearly_sorted", "params": {"swap_frac": 0.05}}
            {"dist": "few_uniques", "params": {"k": 10, "range": [0, 100]}}
            {"dist": "reversed"}
    rng : numpy.random.Generator
        Random number generator owned by the caller (seeded upstream).

    Raises
    ------
    ValueError
        If inputs are invalid or if the distribution is unsupported.
    """
    if not isinstance(n, int) or n < 0:
        raise ValueError(f"n must be a nonnegative int; got {n!r}")
    if not isinstance(spec, dict):
        raise ValueError("spec must be a dict")

    dist = spec.get("dist", None)
    if dist not in SUPPORTED_DISTS:
        raise ValueError(
            f"Unsupported dataset dist: {dist!r}. Supported: {sorted(SUPPORTED_DISTS)}"
        )
    params = spec.get("params") or {}

    if dist == "random":
        lo, hi = _parse_range(params, default=(0.0, 1.0))
        return rng.uniform(lo, hi, size=n).tolist()

    if dist == "nearly_sorted":
        swap_frac = _parse_swap_frac(params)
        arr = [float(i) for i in range(n)]
        num_swaps = int(np.ceil(swap_frac * n))
        if n == 0 or num_swaps <= 0:
            return arr
        idxs = rng.integers(0, n, size=2 * num_swaps)
        for k in range(num_swaps):
            i = int(idxs[2 * k])
            j = int(idxs[2 * k + 1])
            arr[i], arr[j] = arr[j], arr[i]
        return arr

    if dist == "few_uniques":
        k = params.get("k")
        if not isinstance(k, int) or k < 1:
            raise ValueError(f"few_uniques.params.k must be an integer >= 1; got {k!r}")
        lo, hi = _parse_range(params, default=(0.0, 1000.0))
        if n == 0:
            return []
        values = rng.uniform(lo, hi, size=min(k, n))
        return values[rng.integers(0, len(values), size=n)].tolist()

    # reversed; `rng` is unused.
    return [float(i) for i in range(n - 1, -1, -1)]


# ------------------------- helpers ------------------------- #


def _parse_range(params: Dict[str, Any], default: Tuple[float, float]) -> Tuple[float, float]:
    if "range" not in params:
        return default
    spec = params["range"]
    if not isinstance(spec, (list, tuple)) or len(spec) != 2:
        raise ValueError("params.range must be a 2-element list/tuple [min, max]")
    lo, hi = float(spec[0]), float(spec[1])
    if lo > hi:
        raise ValueError(f"params.range invalid: min > max ({lo} > {hi})")
    return lo, hi


def _parse_swap_frac(params: Dict[str, Any]) -> float:
    val = params.get("swap_frac", 0.05)
    try:
        x = float(val)
    except (TypeError, ValueError) as e:
        raise ValueError(
            f"nearly_sorted.params.swap_frac must be a float in [0.0, 1.0]; got {val!r}"
        ) from e
    if not (0.0 <= x <= 1.0):
        raise ValueError(f"nearly_sorted.params.swap_frac must be in [0.0, 1.0]; got {x}")
    return x
