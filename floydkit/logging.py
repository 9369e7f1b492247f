"""Logging utilities for floydkit.

Every module obtains its logger through :func:`get_logger`, which hands out
cached ``floydkit.*`` loggers writing to stderr. The starting level comes from
the ``FLOYDKIT_LOG_LEVEL`` environment variable (default: WARNING).
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional, TextIO

_LOG_LEVEL_ENV_VAR = "FLOYDKIT_LOG_LEVEL"
_DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

_loggers: dict[str, logging.Logger] = {}


def _resolve_level(level: int | str | None) -> int:
    """Turn a level name or number into a logging level, WARNING if unknown."""
    if level is None:
        return logging.WARNING
    if isinstance(level, str):
        return getattr(logging, level.strip().upper(), logging.WARNING)
    return int(level)


_DEFAULT_LEVEL = _resolve_level(os.getenv(_LOG_LEVEL_ENV_VAR))


def _attach_handler(
    logger: logging.Logger,
    level: int,
    stream: TextIO,
    format_string: str,
) -> None:
    handler = logging.StreamHandler(stream)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(format_string))
    logger.addHandler(handler)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get or create a logger below the ``floydkit`` namespace.

    Args:
        name: Logger name, usually ``__name__`` of the caller. Names outside
            the ``floydkit`` namespace are prefixed with ``floydkit.``. If None,
            the package logger itself is returned.

    Returns:
        Cached logger instance with a single stderr handler.

    Example:
        >>> from floydkit.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.debug("relaxing phase k=%d", 3)
    """
    if name is None or name == "floydkit":
        logger_name = "floydkit"
    elif name.startswith("floydkit."):
        logger_name = name
    else:
        logger_name = f"floydkit.{name}"

    cached = _loggers.get(logger_name)
    if cached is not None:
        return cached

    logger = logging.getLogger(logger_name)
    if not logger.handlers:
        logger.setLevel(_DEFAULT_LEVEL)
        _attach_handler(logger, _DEFAULT_LEVEL, sys.stderr, _DEFAULT_FORMAT)
        logger.propagate = False

    _loggers[logger_name] = logger
    return logger


def set_log_level(level: int | str) -> None:
    """Set the level of every floydkit logger, existing and future.

    Args:
        level: Logging level as a number (``logging.DEBUG``) or a name
            (``"DEBUG"``). Unknown names fall back to WARNING.
    """
    global _DEFAULT_LEVEL
    resolved = _resolve_level(level)

    for logger in _loggers.values():
        logger.setLevel(resolved)
        for handler in logger.handlers:
            handler.setLevel(resolved)

    _DEFAULT_LEVEL = resolved


def configure_logging(
    level: int | str = logging.WARNING,
    format_string: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """Replace the handlers of every floydkit logger.

    Intended to be called once by the host application.

    Args:
        level: Logging level (default: WARNING).
        format_string: Format for the new handlers. If None, uses
            ``[LEVEL] name: message``.
        stream: Output stream (default: sys.stderr).
    """
    global _DEFAULT_LEVEL
    resolved = _resolve_level(level)
    stream = sys.stderr if stream is None else stream
    format_string = _DEFAULT_FORMAT if format_string is None else format_string

    for logger in _loggers.values():
        logger.setLevel(resolved)
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
        _attach_handler(logger, resolved, stream, format_string)

    _DEFAULT_LEVEL = resolved
