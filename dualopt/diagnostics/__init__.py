"""Diagnostics and debug switches for derivative evaluation."""

from .core import all_finite, assert_symmetric, is_symmetric
from .debug_mode import debug_context, is_debug_enabled, is_debug_strict, set_debug_enabled

__all__ = [
    "all_finite",
    "assert_symmetric",
    "debug_context",
    "is_debug_enabled",
    "is_debug_strict",
    "is_symmetric",
    "set_debug_enabled",
]
