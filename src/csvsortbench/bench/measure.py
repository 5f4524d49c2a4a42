"""
Timing harness for a single sorting call.

We measure exactly one call to an algorithm's `sort(a, config=...)` using a
monotonic high-resolution clock. All non-essential work (copying, GC, warmup)
happens outside the timed block to keep measurements clean.

Public API (stable):
    time_sort_call(...) -> Timing
"""

from __future__ import annotations

import gc
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence

__all__ = ["Clock", "Timing", "time_sort_call"]

Clock = Callable[[], int]


@dataclass(frozen=True)
class Timing:
    algo: str
    elapsed_ns: int
    output: List[float]


def time_sort_call(
    *,
    algo_name: str,
    algo_fn: Callable[..., List[float]],
    a: Sequence[float],
    config: Optional[Dict[str, Any]] = None,
    warmup: bool = False,
    disable_gc: bool = False,
    defensive_copy: bool = True,
    clock: Clock = time.perf_counter_ns,
) -> Timing:
    """
    Time one call to `algo_fn(a, config=config)`.

    Parameters
    ----------
    algo_name : str
        Logical name of the algorithm (for logs/records).
    algo_fn : Callable[..., list[float]]
        Callable implementing sort(a, *, config=None).
    a : sequence of float
        Input series. Never handed to the algorithm directly when
        `defensive_copy` is set.
    config : dict | None
        Algorithm configuration passed through unchanged.
    warmup : bool
        If True, make one untimed call first.
    disable_gc : bool
        If True, collect and disable Python GC around the timed call; the
        previous GC state is restored afterward. GC state is process-wide, so
        this is only meaningful when nothing else is timing concurrently
        (the offline runner); the threaded service never sets it.
    defensive_copy : bool
        If True, copy the input outside the timed block.
    clock : Callable[[], int]
        Monotonic nanosecond clock; injectable for tests.

    Returns
    -------
    Timing
        Elapsed nanoseconds (never negative) and the sorted output.
    """
    if warmup:
        algo_fn(list(a) if defensive_copy else a, config=config)

    arg = list(a) if defensive_copy else a

    prev_gc_enabled = gc.isenabled()
    try:
        if disable_gc:
            gc.collect()
            gc.disable()

        t0 = clock()
        out = algo_fn(arg, config=config)
        t1 = clock()
    finally:
        # If GC was previously disabled, leave it disabled (respect caller's global state).
        if disable_gc and prev_gc_enabled:
            gc.enable()

    return Timing(algo=algo_name, elapsed_ns=max(0, int(t1 - t0)), output=out)
