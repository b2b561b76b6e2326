"""Line formatting helpers."""

from __future__ import annotations

import traceback
from datetime import datetime

from core.levels import LogLevel

LOG_FILE_SUFFIX = ".log"


def format_line(level: LogLevel, message: str, when: datetime) -> str:
    """Render ``[HH:MM:SS] [LEVEL] message`` using 24-hour time."""
    return f"[{when:%H:%M:%S}] [{level.name}] {message}"


def log_file_name(now: datetime) -> str:
    """Build a log file name from a timestamp, e.g. ``2024_01_02_03_04_05.log``."""
    return now.strftime("%Y_%m_%d_%H_%M_%S") + LOG_FILE_SUFFIX


def with_error_detail(message: str, detail: BaseException | str | None) -> str:
    """Append an error's text and trace to a log message.

    Args:
        message: Caller's message.
        detail: An exception, a preformatted trace string, or None.

    Returns:
        The message, followed by the error text and trace on new lines.
    """
    if detail is None:
        return message
    if isinstance(detail, BaseException):
        parts = [message, f"{type(detail).__name__}: {detail}"]
        trace = "".join(traceback.format_tb(detail.__traceback__)).rstrip()
        if trace:
            parts.append(trace)
        return "\n".join(parts)
    text = str(detail).rstrip()
    if not text:
        return message
    return f"{message}\n{text}"
