"""
Benchmark harness tests: ordering, winner selection and time units.

A fake clock makes durations deterministic so tie-breaks can be asserted.
"""

from __future__ import annotations

import gc
import pathlib
import sys
from typing import Iterator, List

import pytest
from hypothesis import given, settings, strategies as st

_REPO_ROOT = pathlib.Path(__file__).resolve().parents[1]
_SRC = _REPO_ROOT / "src"
if str(_SRC) not in sys.path:
    sys.path.insert(0, str(_SRC))

from csvsortbench.bench import convert_ns, run_benchmark, run_single, time_sort_call


# ------------------------- helpers ------------------------- #

def fake_clock(durations_ns: List[int]):
    """Clock that makes the k-th timed call last durations_ns[k] nanoseconds."""
    ticks: List[int] = []
    t = 0
    for d in durations_ns:
        ticks.extend([t, t + d])
        t += d + 1_000
    it: Iterator[int] = iter(ticks)
    return lambda: next(it)


# ------------------------- measure ------------------------- #

def test_time_sort_call_copies_input_and_restores_gc() -> None:
    seen = []

    def algo(a, *, config=None):
        seen.append(a)
        return sorted(a)

    series = [3.0, 1.0, 2.0]
    was_enabled = gc.isenabled()
    timing = time_sort_call(algo_name="x", algo_fn=algo, a=series, disable_gc=True)
    assert gc.isenabled() == was_enabled
    assert seen[0] is not series
    assert timing.output == [1.0, 2.0, 3.0]
    assert timing.elapsed_ns >= 0


# ------------------------- benchmark ------------------------- #

def test_benchmark_runs_all_five_in_order_on_private_copies() -> None:
    series = [5.0, 3.0, 4.0, 1.0, 2.0]
    report = run_benchmark(series, keep_outputs=True, validate=True)
    assert list(report.timings()) == [
        "Insertion Sort",
        "Shell Sort",
        "Merge Sort",
        "Quick Sort",
        "Heap Sort",
    ]
    for res in report.results.values():
        assert res.sorted_values == [1.0, 2.0, 3.0, 4.0, 5.0]
        assert res.elapsed >= 0
        assert res.unit == "ms"
    assert series == [5.0, 3.0, 4.0, 1.0, 2.0]


def test_winner_is_minimum_duration() -> None:
    clock = fake_clock([50, 40, 10, 30, 20])
    report = run_benchmark([2.0, 1.0], unit="ns", clock=clock)
    assert report.winner.label == "Merge Sort"
    assert report.winner.elapsed == 10


def test_tie_goes_to_earliest_declared() -> None:
    clock = fake_clock([50, 10, 30, 10, 10])
    report = run_benchmark([2.0, 1.0], unit="ns", clock=clock)
    assert report.winner.name == "shell"


def test_tie_after_unit_truncation() -> None:
    # 1.9 ms and 1.1 ms both report as 1 ms; the earlier one wins.
    clock = fake_clock([5_000_000, 1_900_000, 1_100_000, 3_000_000, 2_000_000])
    report = run_benchmark([2.0, 1.0], unit="ms", clock=clock)
    assert report.timings() == {
        "Insertion Sort": 5,
        "Shell Sort": 1,
        "Merge Sort": 1,
        "Quick Sort": 3,
        "Heap Sort": 2,
    }
    assert report.winner.label == "Shell Sort"
    assert report.winner.elapsed_ns == 1_900_000


def test_subset_runs_in_declaration_order() -> None:
    report = run_benchmark([1.0], algorithms=["heap", "Insertion Sort"])
    assert list(report.results) == ["insertion", "heap"]


def test_empty_series_benchmarks_without_error() -> None:
    report = run_benchmark([], keep_outputs=True)
    assert len(report.results) == 5
    assert all(r.sorted_values == [] for r in report.results.values())


def test_run_single_keeps_output_in_ns() -> None:
    res = run_single([3.0, -1.0, 2.0], "quick", clock=fake_clock([1234]))
    assert res.label == "Quick Sort"
    assert res.sorted_values == [-1.0, 2.0, 3.0]
    assert res.elapsed == 1234
    assert res.unit == "ns"


def test_unknown_unit_is_rejected() -> None:
    with pytest.raises(ValueError):
        run_benchmark([1.0], unit="fortnights")
    with pytest.raises(ValueError):
        convert_ns(1, "s")


def test_convert_ns_truncates() -> None:
    assert convert_ns(2_999_999, "ms") == 2
    assert convert_ns(1_500, "us") == 1
    assert convert_ns(7, "ns") == 7


@settings(deadline=None, max_examples=50)
@given(
    st.lists(st.floats(allow_nan=False, allow_infinity=False), max_size=60),
    st.lists(st.integers(min_value=0, max_value=5), min_size=5, max_size=5),
)
def test_property_winner_duration_is_minimum(series: List[float], durations: List[int]) -> None:
    report = run_benchmark(series, unit="ns", keep_outputs=True, clock=fake_clock(durations))
    assert report.winner.elapsed == min(durations)
    assert report.winner.name == list(report.results)[durations.index(min(durations))]
    expected = sorted(series)
    for res in report.results.values():
        assert res.sorted_values == expected


def test_validate_flags_a_broken_algorithm(monkeypatch: pytest.MonkeyPatch) -> None:
    import csvsortbench.algorithms as algorithms

    broken = algorithms.AlgoSpec(name="shell", label="Shell Sort", sort_fn=lambda a, *, config=None: list(a))
    monkeypatch.setitem(algorithms.ALGORITHMS, "shell", broken)
    with pytest.raises(AssertionError, match="Shell Sort output not ascending"):
        run_benchmark([2.0, 1.0], validate=True)
