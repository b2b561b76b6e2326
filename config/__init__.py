"""Config package facade."""

from config.loader import load_options, options_from_dict, resolve_options
from config.models import (
    DEFAULT_BUFFER_LIMIT,
    DEFAULT_LEVEL,
    LoggerOptions,
    LoggerSettings,
    default_log_directory,
)

__all__ = [
    "DEFAULT_BUFFER_LIMIT",
    "DEFAULT_LEVEL",
    "LoggerOptions",
    "LoggerSettings",
    "default_log_directory",
    "load_options",
    "options_from_dict",
    "resolve_options",
]
