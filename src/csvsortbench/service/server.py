"""
Threaded HTTP transport.

One thread per request (ThreadingHTTPServer). The transport only reads the
body, delegates to SortService and writes the response with permissive CORS
headers; it knows nothing about CSV, sorting or the body format.

Usage:
    csvsortbench-serve --config configs/server.yaml
"""

from __future__ import annotations

import argparse
from dataclasses import replace
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from pathlib import Path
from typing import Optional, Type

from rich.console import Console
from rich.markup import escape

from csvsortbench.config import ServiceConfig, load_config
from csvsortbench.service.handler import Request, Response, SortService

__all__ = ["make_handler", "make_server", "main"]

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


def make_handler(service: SortService) -> Type[BaseHTTPRequestHandler]:
    class SortRequestHandler(BaseHTTPRequestHandler):
        protocol_version = "HTTP/1.1"

        def _read_body(self) -> str:
            length = int(self.headers.get("Content-Length") or 0)
            if length <= 0:
                return ""
            return self.rfile.read(length).decode("utf-8", errors="replace")

        def _send(self, response: Response) -> None:
            payload = response.body.encode("utf-8")
            self.send_response(response.status)
            self.send_header("Content-Type", response.content_type)
            self.send_header("Content-Length", str(len(payload)))
            for k, v in CORS_HEADERS.items():
                self.send_header(k, v)
            self.end_headers()
            self.wfile.write(payload)

        def _dispatch(self) -> None:
            self._send(service.handle(Request(self.command, self.path, self._read_body())))

        do_GET = _dispatch
        do_POST = _dispatch

        def do_OPTIONS(self) -> None:
            self.send_response(204)
            for k, v in CORS_HEADERS.items():
                self.send_header(k, v)
            self.send_header("Content-Length", "0")
            self.end_headers()

        def log_message(self, format: str, *args) -> None:
            service.console.log(escape(f"{self.address_string()} {format % args}"))

    return SortRequestHandler


def make_server(service: SortService) -> ThreadingHTTPServer:
    cfg = service.config
    return ThreadingHTTPServer((cfg.host, cfg.port), make_handler(service))


# ------------------------- CLI ------------------------- #

def _parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Serve the CSV sort benchmark over HTTP.")
    p.add_argument("--config", type=str, default=None, help="Path to YAML service config")
    p.add_argument("--port", type=int, default=None, help="Override the configured port")
    return p.parse_args()


def main() -> None:
    args = _parse_args()
    console = Console(stderr=True)
    config: ServiceConfig = load_config(Path(args.config).resolve() if args.config else None)
    if args.port is not None:
        config = replace(config, port=args.port)

    server = make_server(SortService(config, console))
    console.print(f"[bold green]Server running on[/bold green] http://{config.host}:{server.server_port}")
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        console.print("[bold]Shutting down.[/bold]")
    finally:
        server.server_close()


if __name__ == "__main__":
    main()
