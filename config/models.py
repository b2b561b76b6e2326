"""Configuration dataclasses."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from core.levels import LogLevel

DEFAULT_LEVEL = LogLevel.INFO
DEFAULT_BUFFER_LIMIT = 20
DEFAULT_LOG_DIR_NAME = "logs"


def default_log_directory() -> Path:
    """Return ``<cwd>/logs``."""
    return Path.cwd() / DEFAULT_LOG_DIR_NAME


@dataclass
class LoggerOptions:
    """Raw logger options; None means "use the default"."""

    console_level: Any = None
    file_level: Any = None
    log_directory: str | Path | None = None
    buffer_limit: Any = None


@dataclass(frozen=True)
class LoggerSettings:
    """Fully resolved logger configuration."""

    console_level: LogLevel
    file_level: LogLevel
    log_directory: Path
    buffer_limit: int

    @classmethod
    def defaults(cls) -> "LoggerSettings":
        return cls(
            console_level=DEFAULT_LEVEL,
            file_level=DEFAULT_LEVEL,
            log_directory=default_log_directory(),
            buffer_limit=DEFAULT_BUFFER_LIMIT,
        )
