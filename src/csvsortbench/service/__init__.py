"""
Request boundary public API.

Re-exports:
    Request, Response, SortService
"""

from .handler import LIVENESS_MESSAGE, Request, Response, SortService

__all__ = ["LIVENESS_MESSAGE", "Request", "Response", "SortService"]
