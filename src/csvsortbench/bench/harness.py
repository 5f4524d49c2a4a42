"""
Benchmark harness: run every algorithm on the same series and pick a winner.

Algorithms run strictly one after another in declaration order, each on its
own copy of the series. The winner is the first entry with the minimum
duration, so exact ties go to the earlier-declared algorithm.

Public API (stable):
    run_benchmark(series, ...) -> BenchmarkReport
    run_single(series, algo, ...) -> AlgorithmResult
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Sequence

from csvsortbench.algorithms import ALGORITHMS, AlgoSpec, resolve_algorithm
from csvsortbench.bench.checks import check_sort_output
from csvsortbench.bench.measure import Clock, time_sort_call

__all__ = [
    "TIME_UNITS",
    "AlgorithmResult",
    "BenchmarkReport",
    "convert_ns",
    "run_benchmark",
    "run_single",
]

TIME_UNITS: Dict[str, int] = {"ns": 1, "us": 1_000, "ms": 1_000_000}


@dataclass(frozen=True)
class AlgorithmResult:
    name: str
    label: str
    elapsed: int
    unit: str
    elapsed_ns: int
    sorted_values: Optional[List[float]] = None


@dataclass(frozen=True)
class BenchmarkReport:
    results: Dict[str, AlgorithmResult] = field(default_factory=dict)
    winner: Optional[AlgorithmResult] = None

    def timings(self) -> Dict[str, int]:
        """Label -> elapsed, in declaration order."""
        return {r.label: r.elapsed for r in self.results.values()}


def _check_unit(unit: str) -> None:
    if unit not in TIME_UNITS:
        raise ValueError(f"Unsupported time unit: {unit!r}. Supported: {sorted(TIME_UNITS)}")


def convert_ns(elapsed_ns: int, unit: str) -> int:
    _check_unit(unit)
    # Truncate, as the wire format carries whole units.
    return elapsed_ns // TIME_UNITS[unit]


def _run(
    spec: AlgoSpec,
    series: Sequence[float],
    *,
    unit: str,
    keep_output: bool,
    warmup: bool,
    disable_gc: bool,
    validate: bool,
    clock: Clock,
) -> AlgorithmResult:
    timing = time_sort_call(
        algo_name=spec.name,
        algo_fn=spec.sort_fn,
        a=series,
        warmup=warmup,
        disable_gc=disable_gc,
        defensive_copy=True,
        clock=clock,
    )
    if validate:
        check_sort_output(spec.label, series, timing.output)
    return AlgorithmResult(
        name=spec.name,
        label=spec.label,
        elapsed=convert_ns(timing.elapsed_ns, unit),
        unit=unit,
        elapsed_ns=timing.elapsed_ns,
        sorted_values=timing.output if keep_output else None,
    )


def run_benchmark(
    series: Sequence[float],
    *,
    unit: str = "ms",
    algorithms: Optional[Iterable[str]] = None,
    keep_outputs: bool = False,
    warmup: bool = False,
    disable_gc: bool = False,
    validate: bool = False,
    clock: Clock = time.perf_counter_ns,
) -> BenchmarkReport:
    """
    Time every algorithm (or the named subset, still in declaration order)
    on an independent copy of `series`.

    The winner is selected on the reported (unit-converted) duration, so
    algorithms that tie after truncation resolve by declaration order.
    """
    _check_unit(unit)
    if algorithms is None:
        specs = list(ALGORITHMS.values())
    else:
        wanted = {resolve_algorithm(a).name for a in algorithms}
        specs = [s for s in ALGORITHMS.values() if s.name in wanted]

    results: Dict[str, AlgorithmResult] = {}
    for spec in specs:
        results[spec.name] = _run(
            spec,
            series,
            unit=unit,
            keep_output=keep_outputs,
            warmup=warmup,
            disable_gc=disable_gc,
            validate=validate,
            clock=clock,
        )

    # min() returns the first minimal item, which gives the declaration-order tie-break.
    winner = min(results.values(), key=lambda r: r.elapsed) if results else None
    return BenchmarkReport(results=results, winner=winner)


def run_single(
    series: Sequence[float],
    algo: Any,
    *,
    unit: str = "ns",
    warmup: bool = False,
    disable_gc: bool = False,
    validate: bool = False,
    clock: Clock = time.perf_counter_ns,
) -> AlgorithmResult:
    """Run one named algorithm and keep its sorted output."""
    _check_unit(unit)
    spec = algo if isinstance(algo, AlgoSpec) else resolve_algorithm(algo)
    return _run(
        spec,
        series,
        unit=unit,
        keep_output=True,
        warmup=warmup,
        disable_gc=disable_gc,
        validate=validate,
        clock=clock,
    )
