"""Synthetic series generator tests."""

from __future__ import annotations

import pathlib
import sys

import numpy as np
import pytest

_REPO_ROOT = pathlib.Path(__file__).resolve().parents[1]
_SRC = _REPO_ROOT / "src"
if str(_SRC) not in sys.path:
    sys.path.insert(0, str(_SRC))

from csvsortbench.datasets import SUPPORTED_DISTS, make_series


@pytest.mark.parametrize("dist", sorted(SUPPORTED_DISTS))
def test_length_and_type(dist: str) -> None:
    spec = {"dist": dist, "params": {"k": 3}}
    out = make_series(50, spec, np.random.default_rng(0))
    assert len(out) == 50
    assert all(isinstance(x, float) for x in out)
    assert make_series(0, spec, np.random.default_rng(0)) == []


def test_random_is_reproducible_and_in_range() -> None:
    spec = {"dist": "random", "params": {"range": [-5, 5]}}
    a = make_series(100, spec, np.random.default_rng(7))
    b = make_series(100, spec, np.random.default_rng(7))
    assert a == b
    assert all(-5.0 <= x < 5.0 for x in a)


def test_nearly_sorted_is_permutation_of_range() -> None:
    out = make_series(100, {"dist": "nearly_sorted", "params": {"swap_frac": 0.1}}, np.random.default_rng(1))
    assert sorted(out) == [float(i) for i in range(100)]


def test_few_uniques_has_at_most_k_values() -> None:
    out = make_series(200, {"dist": "few_uniques", "params": {"k": 4}}, np.random.default_rng(2))
    assert len(set(out)) <= 4


def test_reversed() -> None:
    assert make_series(4, {"dist": "reversed"}, np.random.default_rng(0)) == [3.0, 2.0, 1.0, 0.0]


@pytest.mark.parametrize(
    "n, spec",
    [
        (-1, {"dist": "random"}),
        (5, {"dist": "zipf"}),
        (5, {"dist": "random", "params": {"range": [3, 1]}}),
        (5, {"dist": "nearly_sorted", "params": {"swap_frac": 2}}),
        (5, {"dist": "few_uniques", "params": {}}),
    ],
)
def test_invalid_specs(n: int, spec: dict) -> None:
    with pytest.raises(ValueError):
        make_series(n, spec, np.random.default_rng(0))
