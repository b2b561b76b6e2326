"""Command-line parsing helpers."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path

from config.models import LoggerOptions, LoggerSettings

LEVEL_CHOICES = ["trace", "debug", "info", "notice", "warn", "error", "critical", "fatal"]


@dataclass
class EmitOptions:
    """Parsed CLI options for emitting log lines."""

    level: str
    messages: list[str]
    config_path: Path | None
    overrides: LoggerOptions
    colorize: bool


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="duolog",
        description="Write log lines to the console and a timestamped log file.",
    )
    parser.add_argument("level", help=f"Level to log at ({', '.join(LEVEL_CHOICES)})")
    parser.add_argument(
        "message",
        nargs="*",
        help="Message to log; reads one message per line from stdin when omitted",
    )
    parser.add_argument("--config", help="Path to a JSON config file")
    parser.add_argument("--console-level", help="Console threshold, e.g. WARN or ALL")
    parser.add_argument("--file-level", help="File threshold, e.g. DEBUG or DISABLED")
    parser.add_argument("--log-dir", help="Directory to write log files into")
    parser.add_argument("--buffer-limit", type=int, help="Max lines held while the log file is unavailable")
    parser.add_argument("--no-color", action="store_true", help="Disable colored console output")
    return parser


def parse_cli(argv: list[str] | None = None) -> EmitOptions:
    """Parse command-line arguments into EmitOptions.

    Args:
        argv: Optional argument list.

    Returns:
        EmitOptions with normalized paths and overrides.
    """
    args = _build_parser().parse_args(argv)
    config_path = Path(args.config).expanduser().resolve() if args.config else None
    message = " ".join(args.message).strip()
    overrides = LoggerOptions(
        console_level=args.console_level,
        file_level=args.file_level,
        log_directory=args.log_dir,
        buffer_limit=args.buffer_limit,
    )
    return EmitOptions(
        level=args.level.strip().lower(),
        messages=[message] if message else [],
        config_path=config_path,
        overrides=overrides,
        colorize=not args.no_color,
    )


def _default_options() -> LoggerOptions:
    settings = LoggerSettings.defaults()
    return LoggerOptions(
        console_level=settings.console_level,
        file_level=settings.file_level,
        log_directory=settings.log_directory,
        buffer_limit=settings.buffer_limit,
    )


def merge_options(base: LoggerOptions | None, overrides: LoggerOptions) -> LoggerOptions | None:
    """Apply CLI overrides on top of file options; fields left as None keep the base.

    Without a config file the overrides apply on top of the built-in defaults.
    """
    if base is None:
        if all(value is None for value in vars(overrides).values()):
            return None
        base = _default_options()
    merged = dict(vars(base))
    for key, value in vars(overrides).items():
        if value is not None:
            merged[key] = value
    return LoggerOptions(**merged)
