"""Log levels and the per-destination severity filter."""

from __future__ import annotations

from enum import IntEnum
from typing import Any


class LogLevel(IntEnum):
    """Ordered log levels; a lower value is more severe.

    DISABLED and ALL are bounds for thresholds only, an event is never
    emitted at either of them.
    """

    DISABLED = 0
    FATAL = 1
    CRITICAL = 2
    ERROR = 3
    WARN = 4
    NOTICE = 5
    INFO = 6
    DEBUG = 7
    TRACE = 8
    ALL = 9


_ALIASES = {"WARNING": LogLevel.WARN}


def passes(level: int, threshold: int) -> bool:
    """Return True when an event at ``level`` should reach a sink set to ``threshold``."""
    return LogLevel.DISABLED < level < LogLevel.ALL and level <= threshold


def coerce_level(value: Any) -> LogLevel | None:
    """Convert a raw config value into a LogLevel.

    Args:
        value: LogLevel, int in range, or a level name.

    Returns:
        The matching LogLevel, or None when the value is absent or out of range.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        try:
            return LogLevel(value)
        except ValueError:
            return None
    if isinstance(value, str):
        name = value.strip().upper()
        if name in _ALIASES:
            return _ALIASES[name]
        return LogLevel.__members__.get(name)
    return None
