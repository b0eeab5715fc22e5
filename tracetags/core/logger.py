"""Logging setup for the tracetags package."""

from __future__ import annotations

import logging
from typing import Literal, get_args

LogLevel = Literal["silent", "error", "warn", "info", "debug"]

PACKAGE_LOGGER_NAME = "tracetags"

_LEVELS: dict[str, int] = {
    "silent": logging.CRITICAL + 1,
    "error": logging.ERROR,
    "warn": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}

_handler: logging.Handler | None = None
_current_level: LogLevel = "warn"


def validate_log_level(level: str) -> LogLevel:
    """Return ``level`` if it is a known log level, otherwise raise ValueError."""
    if level not in get_args(LogLevel):
        raise ValueError(f"Invalid log level {level!r}, expected one of {', '.join(get_args(LogLevel))}")
    return level  # type: ignore[return-value]


def configure_logger(log_level: LogLevel = "info", prefix: str = "tracetags") -> logging.Logger:
    """
    Install a stream handler on the package logger.

    Calling this again replaces the handler installed by the previous call.
    """
    global _handler

    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    if _handler is not None:
        package_logger.removeHandler(_handler)

    _handler = logging.StreamHandler()
    _handler.setFormatter(logging.Formatter(f"[{prefix}] %(levelname)s: %(message)s"))
    package_logger.addHandler(_handler)
    package_logger.propagate = False

    set_log_level(log_level)
    return package_logger


def set_log_level(level: LogLevel) -> None:
    """Set the level of the package logger."""
    global _current_level

    _current_level = validate_log_level(level)
    logging.getLogger(PACKAGE_LOGGER_NAME).setLevel(_LEVELS[level])


def get_log_level() -> LogLevel:
    """Get the level last set through this module."""
    return _current_level
