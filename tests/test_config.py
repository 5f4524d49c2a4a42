"""Service configuration loading tests."""

from __future__ import annotations

import pathlib
import sys

import pytest

_REPO_ROOT = pathlib.Path(__file__).resolve().parents[1]
_SRC = _REPO_ROOT / "src"
if str(_SRC) not in sys.path:
    sys.path.insert(0, str(_SRC))

from csvsortbench.config import ServiceConfig, load_config


def test_defaults() -> None:
    cfg = load_config()
    assert cfg.port == 8080
    assert cfg.benchmark_unit == "ms"
    assert cfg.direct_unit == "ns"
    assert not cfg.validate


def test_repo_server_yaml_loads() -> None:
    cfg = load_config(_REPO_ROOT / "configs" / "server.yaml")
    assert cfg == ServiceConfig()


def test_yaml_overrides(tmp_path: pathlib.Path) -> None:
    path = tmp_path / "server.yaml"
    path.write_text("port: 9090\nbenchmark_unit: us\nvalidate: true\n", encoding="utf-8")
    cfg = load_config(path)
    assert (cfg.port, cfg.benchmark_unit, cfg.validate) == (9090, "us", True)


def test_empty_yaml_gives_defaults(tmp_path: pathlib.Path) -> None:
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config(path) == ServiceConfig()


@pytest.mark.parametrize(
    "raw",
    [
        {"colour": "blue"},
        {"benchmark_unit": "s"},
        {"port": 70000},
        {"port": "8080"},
        {"disable_gc": True},
        ["port", 1],
    ],
)
def test_invalid_configs(raw) -> None:
    with pytest.raises(ValueError):
        ServiceConfig.from_dict(raw)
