"""Configuration loading and normalization."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Tuple

from config.models import (
    DEFAULT_BUFFER_LIMIT,
    DEFAULT_LEVEL,
    LoggerOptions,
    LoggerSettings,
    default_log_directory,
)
from core.levels import coerce_level

OPTION_KEYS = ("console_level", "file_level", "log_directory", "buffer_limit")


def _as_positive_int(value: Any) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, float) and not value.is_integer():
        return None
    try:
        number = int(value)
    except (TypeError, ValueError):
        return None
    return number if number > 0 else None


def _as_directory(value: Any) -> Path | None:
    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None
    return Path(text).expanduser()


def resolve_options(options: LoggerOptions | None) -> Tuple[LoggerSettings, List[str]]:
    """Resolve raw options into settings, substituting defaults field by field.

    Args:
        options: Raw options, or None to use the built-in defaults.

    Returns:
        The resolved settings and one note per substituted field.
    """
    if options is None:
        return LoggerSettings.defaults(), []

    notes: List[str] = []

    console_level = coerce_level(options.console_level)
    if console_level is None:
        console_level = DEFAULT_LEVEL
        notes.append(f"Console log level is invalid or missing, using the {DEFAULT_LEVEL.name} level")

    file_level = coerce_level(options.file_level)
    if file_level is None:
        file_level = DEFAULT_LEVEL
        notes.append(f"File log level is invalid or missing, using the {DEFAULT_LEVEL.name} level")

    log_directory = _as_directory(options.log_directory)
    if log_directory is None:
        log_directory = default_log_directory()
        notes.append(f"Log directory not specified, using the default path {log_directory}")

    buffer_limit = _as_positive_int(options.buffer_limit)
    if buffer_limit is None:
        buffer_limit = DEFAULT_BUFFER_LIMIT
        notes.append(f"Buffer limit is invalid or missing, using {DEFAULT_BUFFER_LIMIT} as the default")

    settings = LoggerSettings(
        console_level=console_level,
        file_level=file_level,
        log_directory=log_directory,
        buffer_limit=buffer_limit,
    )
    return settings, notes


def options_from_dict(raw: Dict[str, Any]) -> LoggerOptions:
    """Build LoggerOptions from a raw dictionary.

    Values are kept as-is; validation happens in ``resolve_options``.
    """
    section = raw.get("logger")
    if isinstance(section, dict):
        raw = section
    return LoggerOptions(**{key: raw.get(key) for key in OPTION_KEYS})


def load_options(path: Path) -> LoggerOptions:
    """Load logger options from a JSON file."""
    with path.open("r", encoding="utf-8") as f:
        raw = json.load(f)
    if not isinstance(raw, dict):
        raise ValueError(f"Config root must be an object: {path}")
    return options_from_dict(raw)
