"""
Datasets package public API.

Re-export the series generator so callers can write:
    from csvsortbench.datasets import make_series, SUPPORTED_DISTS
"""

from .generators import SUPPORTED_DISTS, make_series

__all__ = ["make_series", "SUPPORTED_DISTS"]
