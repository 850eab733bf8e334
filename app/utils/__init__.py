"""Utility helpers for reusable functionality."""

from .clock import now_ns
from .identifiers import new_identifier

__all__ = [
    "new_identifier",
    "now_ns",
]
