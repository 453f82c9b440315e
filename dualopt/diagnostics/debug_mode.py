"""Debug mode management for dualopt.

``DUALOPT_DEBUG`` selects the initial mode: ``1/true/yes/on`` turns on the
derivative self-checks, which log a warning on disagreement, and ``strict``
additionally makes a failed self-check raise ``ValueError``.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator, Optional

_DEBUG_ENV_VAR = "DUALOPT_DEBUG"
_TRUTHY = ("1", "true", "yes", "on")
_STRICT = ("strict", "raise")


def _parse_debug_env(raw: Optional[str]) -> tuple[bool, bool]:
    value = (raw or "0").strip().lower()
    if value in _STRICT:
        return True, True
    return value in _TRUTHY, False


_debug_enabled, _debug_strict = _parse_debug_env(os.getenv(_DEBUG_ENV_VAR))


def is_debug_enabled() -> bool:
    """
    Return whether dualopt debug mode is currently enabled.

    When enabled, derivative evaluations run extra self-consistency checks
    (Hessian symmetry, agreement of the two gradient copies carried by the
    nested dual numbers) and log a warning on disagreement.
    """
    return _debug_enabled


def is_debug_strict() -> bool:
    """Return whether failed self-checks raise instead of only logging."""
    return _debug_enabled and _debug_strict


def set_debug_enabled(enabled: bool, strict: bool = False) -> None:
    """
    Globally enable or disable dualopt debug mode.

    Parameters
    ----------
    enabled:
        Whether to run the derivative self-checks.
    strict:
        Raise ``ValueError`` when a self-check fails. Ignored while disabled.
    """
    global _debug_enabled, _debug_strict
    _debug_enabled = bool(enabled)
    _debug_strict = bool(strict)


@contextmanager
def debug_context(enabled: bool = True, strict: bool = False) -> Iterator[None]:
    """
    Temporarily switch debug mode, restoring the previous mode on exit.

    Example
    -------
    >>> with debug_context(True, strict=True):
    ...     pass
    """
    global _debug_enabled, _debug_strict
    prev = (_debug_enabled, _debug_strict)
    _debug_enabled, _debug_strict = bool(enabled), bool(strict)
    try:
        yield
    finally:
        _debug_enabled, _debug_strict = prev


__all__ = ["debug_context", "is_debug_enabled", "is_debug_strict", "set_debug_enabled"]
