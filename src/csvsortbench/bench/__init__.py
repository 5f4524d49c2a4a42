"""
Benchmarking public API.

Re-exports:
    run_benchmark, run_single, AlgorithmResult, BenchmarkReport, time_sort_call
"""

from .harness import AlgorithmResult, BenchmarkReport, TIME_UNITS, convert_ns, run_benchmark, run_single
from .measure import Timing, time_sort_call

__all__ = [
    "AlgorithmResult",
    "BenchmarkReport",
    "TIME_UNITS",
    "convert_ns",
    "run_benchmark",
    "run_single",
    "Timing",
    "time_sort_call",
]
