"""Logging utilities for dualopt.

Every module logs through a cached, namespaced logger so applications can
tune verbosity of the whole package in one call. The initial level comes
from ``DUALOPT_LOG_LEVEL`` (default ``WARNING``); line-search failures log
at WARNING and accepted steps at DEBUG.
"""

from __future__ import annotations

import logging
import os
import sys
from contextlib import contextmanager
from typing import Iterator, Optional

_LEVEL_ENV_VAR = "DUALOPT_LOG_LEVEL"
_DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

_loggers: dict[str, logging.Logger] = {}


def _resolve_level(level: int | str) -> int:
    if isinstance(level, str):
        return getattr(logging, level.strip().upper(), logging.WARNING)
    return level


_DEFAULT_LEVEL = _resolve_level(os.getenv(_LEVEL_ENV_VAR, "WARNING"))


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get or create a logger for the given module name.

    Loggers are cached so repeated calls never stack handlers. Pass
    ``__name__`` from the calling module.

    Args:
        name: Logger name. Names outside the ``dualopt`` namespace are
            prefixed with ``dualopt.``. If None, the package logger is returned.

    Returns:
        Configured logger instance.

    Example:
        >>> from dualopt.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.info("Evaluating term")
    """
    if name is None:
        name = "dualopt"

    if name == "dualopt" or name.startswith("dualopt."):
        logger_name = name
    else:
        logger_name = f"dualopt.{name}"

    if logger_name in _loggers:
        return _loggers[logger_name]

    logger = logging.getLogger(logger_name)

    if not logger.handlers:
        logger.setLevel(_DEFAULT_LEVEL)
        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(_DEFAULT_LEVEL)
        handler.setFormatter(logging.Formatter(_DEFAULT_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False

    _loggers[logger_name] = logger
    return logger


def _apply_level(logger: logging.Logger, level: int) -> None:
    logger.setLevel(level)
    for handler in logger.handlers:
        handler.setLevel(level)


def set_log_level(level: int | str) -> None:
    """Set the logging level for all dualopt loggers.

    Args:
        level: Logging level (``logging.DEBUG``, ``logging.INFO``, ...) or its
            name as a string.
    """
    level = _resolve_level(level)

    for logger in _loggers.values():
        _apply_level(logger, level)

    global _DEFAULT_LEVEL
    _DEFAULT_LEVEL = level


def configure_logging(
    level: int | str = logging.WARNING,
    format_string: Optional[str] = None,
    stream: Optional[object] = None,
) -> None:
    """Configure logging for dualopt.

    Replaces the handlers of every cached logger. Typically called once at
    application startup.

    Args:
        level: Logging level (default: WARNING).
        format_string: Custom format string. If None, uses the default.
        stream: Output stream (default: ``sys.stderr``).

    Example:
        >>> import logging
        >>> from dualopt.logging import configure_logging
        >>> configure_logging(level=logging.INFO)
    """
    level = _resolve_level(level)

    if stream is None:
        stream = sys.stderr

    formatter = logging.Formatter(format_string or _DEFAULT_FORMAT)

    for logger in _loggers.values():
        logger.setLevel(level)
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
        handler = logging.StreamHandler(stream)
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    global _DEFAULT_LEVEL
    _DEFAULT_LEVEL = level


@contextmanager
def log_level(level: int | str) -> Iterator[None]:
    """Temporarily set the level of every dualopt logger.

    Useful for tracing the trial steps of a single line search::

        with log_level("DEBUG"):
            alpha = backtracking_line_search(objective, x, fval, g, p)

    Loggers created inside the block fall back to the previous default on
    exit.
    """
    global _DEFAULT_LEVEL
    previous = {name: logger.level for name, logger in _loggers.items()}
    previous_default = _DEFAULT_LEVEL
    set_log_level(level)
    try:
        yield
    finally:
        for name, logger in _loggers.items():
            _apply_level(logger, previous.get(name, previous_default))
        _DEFAULT_LEVEL = previous_default


__all__ = ["configure_logging", "get_logger", "log_level", "set_log_level"]
