"""
Service configuration loaded from YAML.

Example (configs/server.yaml):
    host: 127.0.0.1
    port: 8080
    benchmark_unit: ms
    direct_unit: ns
    warmup: false
    validate: false
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from csvsortbench.bench.harness import TIME_UNITS

__all__ = ["ServiceConfig", "load_config"]


@dataclass(frozen=True)
class ServiceConfig:
    host: str = "127.0.0.1"
    port: int = 8080
    benchmark_unit: str = "ms"
    direct_unit: str = "ns"
    warmup: bool = False
    validate: bool = False

    def __post_init__(self) -> None:
        for key in ("benchmark_unit", "direct_unit"):
            unit = getattr(self, key)
            if unit not in TIME_UNITS:
                raise ValueError(f"{key} must be one of {sorted(TIME_UNITS)}; got {unit!r}")
        if not isinstance(self.port, int) or isinstance(self.port, bool):
            raise ValueError(f"port must be an integer; got {self.port!r}")
        if not 0 <= self.port <= 65535:
            raise ValueError(f"port must be in [0, 65535]; got {self.port}")

    @classmethod
    def from_dict(cls, raw: Optional[Dict[str, Any]]) -> "ServiceConfig":
        if raw is None:
            return cls()
        if not isinstance(raw, dict):
            raise ValueError("service config must be a mapping")
        if "disable_gc" in raw:
            # Toggling GC from one request thread would skew timings in every other.
            raise ValueError("disable_gc is not supported by the threaded service; use the offline runner")
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(raw) - known)
        if unknown:
            raise ValueError(f"Unknown service config keys: {unknown}")
        return replace(cls(), **raw)


def load_config(path: Optional[Union[str, Path]] = None) -> ServiceConfig:
    """Read `path` if given, else return defaults."""
    if path is None:
        return ServiceConfig()
    with Path(path).open("r", encoding="utf-8") as f:
        return ServiceConfig.from_dict(yaml.safe_load(f))
