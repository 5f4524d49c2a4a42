"""
Experiment runner: repeat the five-algorithm benchmark from a YAML config.

Usage (from repo root):
    python -m csvsortbench.bench.runner experiments/configs/02_csv_column.yaml

Outputs in a new run directory:
    - config_resolved.yaml    # the config we actually used
    - meta.json               # environment info (python, numpy, cpu/ram, git commit)
    - results.jsonl           # one JSON line per (repeat, algorithm) sample
    - summary.csv             # median + IQR + wins per algorithm
    - (console) rich/tqdm summaries

Design notes:
- The series is built ONCE (from a CSV column or a synthetic generator) and
  every repeat benchmarks all selected algorithms on private copies of it.
- Every run is checked for ascending order and unchanged values; a wrong output
  aborts the experiment.
"""

from __future__ import annotations

import argparse
import datetime as _dt
import json
import os
import subprocess
from pathlib import Path
from typing import Any, Dict, List, Optional

import numpy as np
import pandas as pd
import psutil
import yaml
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from tqdm import tqdm

from csvsortbench.algorithms import ALGORITHMS, resolve_algorithm
from csvsortbench.bench.harness import run_benchmark
from csvsortbench.datasets import make_series
from csvsortbench.table import (
    extract_lenient,
    extract_strict,
    parse_csv,
    resolve_by_index,
    resolve_by_name,
)

_console = Console()

SUMMARY_COLUMNS = ["algo", "label", "samples_ok", "median_ns", "iqr_ns", "min_ns", "max_ns", "wins"]


# ------------------------- helpers: IO & meta ------------------------- #

def _load_yaml(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        return yaml.safe_load(f)


def _write_yaml(obj: Dict[str, Any], path: Path) -> None:
    with path.open("w", encoding="utf-8") as f:
        yaml.safe_dump(obj, f, sort_keys=False)


def _append_jsonl(obj: Dict[str, Any], path: Path) -> None:
    with path.open("a", encoding="utf-8") as f:
        f.write(json.dumps(obj, separators=(",", ":"), ensure_ascii=False))
        f.write("\n")


def _timestamp() -> str:
    return _dt.datetime.now().strftime("%Y%m%d_%H%M%S")


def _ensure_run_dir(base_dir: Path, experiment_name: str) -> Path:
    base_dir.mkdir(parents=True, exist_ok=True)
    run_dir = base_dir / f"{_timestamp()}_{experiment_name}"
    run_dir.mkdir(parents=False, exist_ok=False)
    return run_dir


def _git_commit_short() -> Optional[str]:
    try:
        out = subprocess.check_output(["git", "rev-parse", "--short", "HEAD"], stderr=subprocess.DEVNULL)
    except (OSError, subprocess.CalledProcessError):
        return None
    return out.decode("utf-8").strip()


def _gather_meta() -> Dict[str, Any]:
    import platform
    return {
        "python": platform.python_version(),
        "numpy": np.__version__,
        "pandas": pd.__version__,
        "psutil": psutil.__version__,
        "git_commit": _git_commit_short(),
        "machine": {
            "cpu": platform.processor() or platform.machine(),
            "cores_logical": psutil.cpu_count(logical=True),
            "cores_physical": psutil.cpu_count(logical=False),
            "ram_gb": round(psutil.virtual_memory().total / (1024**3), 2),
            "platform": platform.platform(),
        },
        "start_time": _dt.datetime.now().isoformat(timespec="seconds"),
        "pid": os.getpid(),
        "cwd": str(Path.cwd()),
    }


# ------------------------- dataset ------------------------- #

def load_series(dataset: Dict[str, Any], rng: np.random.Generator, base_dir: Path) -> List[float]:
    """
    Build the benchmark series from the `dataset` config block.

    CSV source:
        {"source": "csv", "path": "data.csv", "column": "price", "policy": "strict"}
        policy "strict" resolves `column` by name; "lenient" treats it as an index.
    Synthetic source:
        {"dist": "random", "n": 5000, "params": {...}}
    """
    if dataset.get("source") == "csv":
        path = Path(dataset["path"])
        if not path.is_absolute():
            path = base_dir / path
        table = parse_csv(path.read_text(encoding="utf-8"))
        policy = dataset.get("policy", "strict")
        if policy == "strict":
            return extract_strict(table, resolve_by_name(table, str(dataset["column"])))
        if policy == "lenient":
            return extract_lenient(table, resolve_by_index(str(dataset["column"])))
        raise ValueError(f"dataset.policy must be 'strict' or 'lenient'; got {policy!r}")

    if "n" not in dataset:
        raise ValueError("Synthetic dataset requires 'n'")
    return make_series(int(dataset["n"]), dataset, rng)


# ------------------------- summary ------------------------- #

def _iqr_ns(group: pd.Series) -> int:
    return int(group.quantile(0.75) - group.quantile(0.25))


def _aggregate_summary(jsonl_path: Path) -> pd.DataFrame:
    if not jsonl_path.exists():
        return pd.DataFrame(columns=SUMMARY_COLUMNS)
    df = pd.read_json(jsonl_path, lines=True)
    if df.empty:
        return pd.DataFrame(columns=SUMMARY_COLUMNS)

    out = (
        df.groupby(["algo", "label"], as_index=False, sort=False)
        .agg(
            samples_ok=("time_ns", "count"),
            median_ns=("time_ns", "median"),
            iqr_ns=("time_ns", _iqr_ns),
            min_ns=("time_ns", "min"),
            max_ns=("time_ns", "max"),
            wins=("winner", "sum"),
        )
    )
    out[["median_ns", "iqr_ns", "min_ns", "max_ns", "wins"]] = (
        out[["median_ns", "iqr_ns", "min_ns", "max_ns", "wins"]].astype("int64")
    )
    # Declaration order, not alphabetical.
    order = {name: i for i, name in enumerate(ALGORITHMS)}
    out = out.sort_values("algo", key=lambda s: s.map(order), ignore_index=True)
    return out[SUMMARY_COLUMNS]


def _print_rich_summary(summary: pd.DataFrame, n: int, repeats: int) -> None:
    table = Table(title=f"Benchmark Summary (n={n}, repeats={repeats}, ms)")
    table.add_column("Algorithm", style="bold")
    table.add_column("median ± IQR", justify="right")
    table.add_column("min", justify="right")
    table.add_column("max", justify="right")
    table.add_column("wins", justify="right")
    for row in summary.itertuples(index=False):
        table.add_row(
            f"[bold]{row.label}[/]",
            f"{row.median_ns / 1e6:.3f} ± {row.iqr_ns / 1e6:.3f}",
            f"{row.min_ns / 1e6:.3f}",
            f"{row.max_ns / 1e6:.3f}",
            str(row.wins),
        )
    _console.print()
    _console.print(table)
    _console.print()


# ------------------------- core runner ------------------------- #

def run_experiment(config_path: Path) -> Path:
    cfg = _load_yaml(config_path)

    required = ["experiment_name", "output_dir", "seed", "repeats", "warmup", "disable_gc", "dataset"]
    missing = [k for k in required if k not in cfg]
    if missing:
        raise ValueError(f"Missing required config keys: {missing}")

    experiment_name: str = str(cfg["experiment_name"])
    output_dir = Path(cfg["output_dir"])
    if not output_dir.is_absolute():
        output_dir = config_path.parent / output_dir
    repeats: int = int(cfg["repeats"])
    warmup: bool = bool(cfg["warmup"])
    disable_gc: bool = bool(cfg["disable_gc"])
    dataset: Dict[str, Any] = dict(cfg["dataset"])
    algo_names: List[str] = [resolve_algorithm(a).name for a in cfg.get("algorithms") or ALGORITHMS]

    if repeats < 1:
        raise ValueError("Config 'repeats' must be a positive integer")

    rng = np.random.default_rng(int(cfg["seed"]))
    series = load_series(dataset, rng, config_path.parent)

    run_dir = _ensure_run_dir(output_dir, experiment_name)
    results_path = run_dir / "results.jsonl"
    summary_path = run_dir / "summary.csv"
    meta_path = run_dir / "meta.json"
    cfg_resolved_path = run_dir / "config_resolved.yaml"

    _write_yaml(cfg, cfg_resolved_path)
    with meta_path.open("w", encoding="utf-8") as f:
        json.dump(_gather_meta(), f, indent=2)

    _console.print(f"[bold green]Run directory:[/bold green] {run_dir}")
    _console.print(f"[bold]Experiment:[/bold] {experiment_name}  [bold]n:[/bold] {len(series)}")
    _console.print(f"[bold]Algorithms:[/bold] {', '.join(algo_names)}")

    for trial in tqdm(range(repeats), desc="Repeats", unit="run"):
        report = run_benchmark(
            series,
            unit="ns",
            algorithms=algo_names,
            warmup=warmup,
            disable_gc=disable_gc,
            validate=True,
        )
        for res in report.results.values():
            _append_jsonl(
                {
                    "algo": res.name,
                    "label": res.label,
                    "n": len(series),
                    "trial": trial,
                    "time_ns": res.elapsed_ns,
                    "winner": report.winner is res,
                },
                results_path,
            )

    summary_df = _aggregate_summary(results_path)
    summary_df.to_csv(summary_path, index=False)
    _print_rich_summary(summary_df, len(series), repeats)

    _console.print("[bold green]Done.[/bold green] Wrote:")
    for p in (results_path, summary_path, meta_path, cfg_resolved_path):
        _console.print(f" - {p}")
    return run_dir


# ------------------------- CLI ------------------------- #

def _parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Run a repeated sort benchmark from a YAML config.")
    p.add_argument("config", type=str, help="Path to YAML experiment config")
    return p.parse_args()


def main() -> None:
    args = _parse_args()
    config_path = Path(args.config).resolve()
    if not config_path.exists():
        raise SystemExit(f"Config file not found: {config_path}")
    try:
        run_experiment(config_path)
    except Exception as e:
        _console.print(f"[bold red]Runner failed:[/bold red] {escape(repr(e))}")
        raise


if __name__ == "__main__":
    main()
