"""Leveled diagnostic messages written to standard error."""

from __future__ import annotations

import sys
from enum import IntEnum

__all__ = ["LogLevel", "log", "set_minimal_log_level", "minimal_log_level"]


class LogLevel(IntEnum):
    """Severity of a log message; NO_LOGS silences everything."""

    INFO = 0
    WARNING = 1
    ERROR = 2
    NO_LOGS = 3


_PREFIXES = {
    LogLevel.INFO: "[INFO] ",
    LogLevel.WARNING: "[WARNING] ",
    LogLevel.ERROR: "[ERROR] ",
}

_minimal_level = LogLevel.INFO


def set_minimal_log_level(level: LogLevel) -> None:
    """Suppress every message whose level is below ``level``."""
    global _minimal_level
    _minimal_level = LogLevel(level)


def minimal_log_level() -> LogLevel:
    """Return the level below which messages are suppressed."""
    return _minimal_level


def log(level: LogLevel, message: str) -> None:
    """Write ``message`` to standard error, prefixed with its level."""
    level = LogLevel(level)
    if level < _minimal_level or level is LogLevel.NO_LOGS:
        return
    sys.stderr.write(f"{_PREFIXES[level]}{message}\n")