"""
Sorting algorithms public API.

Every algorithm module exposes
    sort(a, *, config=None) -> list[float]
which returns a new ascending list and never mutates `a`, plus a display
`LABEL`. `ALGORITHMS` lists them in declaration order, which is also the
order the benchmark runs them and the tie-break order for the winner.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, List

from . import heap, insertion, merge, quick, shell

__all__ = ["AlgoSpec", "ALGORITHMS", "resolve_algorithm"]


@dataclass(frozen=True)
class AlgoSpec:
    name: str
    label: str
    sort_fn: Callable[..., List[float]]


ALGORITHMS: Dict[str, AlgoSpec] = {
    mod.__name__.rsplit(".", 1)[-1]: AlgoSpec(
        name=mod.__name__.rsplit(".", 1)[-1], label=mod.LABEL, sort_fn=mod.sort
    )
    for mod in (insertion, shell, merge, quick, heap)
}


def resolve_algorithm(key: Any) -> AlgoSpec:
    """
    Look up an algorithm by module name ("quick") or label ("Quick Sort"),
    case-insensitively.

    Raises
    ------
    KeyError
        If nothing matches.
    """
    wanted = str(key).strip().lower()
    for spec in ALGORITHMS.values():
        if wanted in (spec.name, spec.label.lower()):
            return spec
    raise KeyError(f"Unknown algorithm: {key!r}. Supported: {list(ALGORITHMS)}")
