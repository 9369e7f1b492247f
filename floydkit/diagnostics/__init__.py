"""Diagnostics and debugging utilities for floydkit."""

from .core import (
    check_next_hops,
    check_triangle_inequality,
    triangle_violations,
)
from .debug_mode import (
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

__all__ = [
    "triangle_violations",
    "check_triangle_inequality",
    "check_next_hops",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
]
