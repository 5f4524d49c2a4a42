"""
Request boundary: route a decoded request through the core and encode the
result.

The transport hands over a `Request(method, route, body)` and receives a
`Response(status, body, content_type)`. Every failure raised while decoding,
extracting or sorting is caught here and rendered as {"error": ...}:
SortBenchError kinds map to 400, anything else to 500.

Routes:
    POST /sort         CSV###NAME   strict by-name extraction + full benchmark
    POST /column       CSV###INDEX  lenient by-index extraction
    POST /sort-values  TYPE###INDEX###[values]  benchmark or one algorithm
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional

from rich.console import Console
from rich.markup import escape

from csvsortbench.bench.harness import run_benchmark, run_single
from csvsortbench.config import ServiceConfig
from csvsortbench.encode import encode_error, encode_report, encode_sorted, encode_values
from csvsortbench.errors import SortBenchError
from csvsortbench.service.protocol import decode_column_request, decode_sort_values_request
from csvsortbench.table import (
    extract_lenient,
    extract_strict,
    parse_csv,
    resolve_by_index,
    resolve_by_name,
)

__all__ = ["Request", "Response", "SortService", "LIVENESS_MESSAGE"]

LIVENESS_MESSAGE = "SortServer is running!"
JSON = "application/json"


@dataclass(frozen=True)
class Request:
    method: str
    route: str
    body: str = ""


@dataclass(frozen=True)
class Response:
    status: int
    body: str
    content_type: str = JSON


class SortService:
    """Stateless per request; safe to share across handler threads."""

    def __init__(self, config: Optional[ServiceConfig] = None, console: Optional[Console] = None) -> None:
        self.config = config or ServiceConfig()
        self.console = console or Console(stderr=True)
        self._routes: Dict[str, Callable[[str], str]] = {
            "/sort": self.sort_by_name,
            "/column": self.column_by_index,
            "/sort-values": self.sort_values,
        }

    # ------------------------- boundary ------------------------- #

    def handle(self, request: Request) -> Response:
        route = request.route.split("?", 1)[0].rstrip("/") or "/"
        fn = self._routes.get(route)
        if request.method.upper() != "POST" or fn is None:
            return Response(200, LIVENESS_MESSAGE, "text/plain")

        self.console.log(f"{request.method} {route}: body {len(request.body)} characters")
        try:
            body = fn(request.body)
        except SortBenchError as e:
            self.console.log(f"[yellow]{route} rejected:[/yellow] {escape(str(e))}")
            return Response(400, encode_error(str(e)))
        except Exception as e:
            self.console.log(f"[bold red]{route} failed:[/bold red] {escape(repr(e))}")
            return Response(500, encode_error(str(e) or type(e).__name__))
        self.console.log(f"{route} response sent")
        return Response(200, body)

    # ------------------------- routes ------------------------- #

    def sort_by_name(self, body: str) -> str:
        req = decode_column_request(body)
        table = parse_csv(req.csv_text)
        column = resolve_by_name(table, req.selector)
        series = extract_strict(table, column)
        self.console.log(f"Sorting {len(series)} numeric values from column {escape(repr(req.selector))}")
        report = run_benchmark(
            series,
            unit=self.config.benchmark_unit,
            warmup=self.config.warmup,
            validate=self.config.validate,
        )
        return encode_report(report)

    def column_by_index(self, body: str) -> str:
        req = decode_column_request(body)
        table = parse_csv(req.csv_text)
        column = resolve_by_index(req.selector)
        series = extract_lenient(table, column)
        self.console.log(f"Extracted {len(series)} numeric values from column {column.position}")
        return encode_values(series, column.position)

    def sort_values(self, body: str) -> str:
        req = decode_sort_values_request(body)
        if req.benchmark:
            self.console.log(f"Benchmarking {len(req.values)} values")
            report = run_benchmark(
                req.values,
                unit=self.config.benchmark_unit,
                warmup=self.config.warmup,
                validate=self.config.validate,
            )
            return encode_report(report)

        self.console.log(f"{req.algorithm.label} on {len(req.values)} values")
        result = run_single(
            req.values,
            req.algorithm,
            unit=self.config.direct_unit,
            warmup=self.config.warmup,
            validate=self.config.validate,
        )
        return encode_sorted(result, column=req.column)
