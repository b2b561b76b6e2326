#!/usr/bin/env python3
"""CLI entrypoint for emitting log lines."""

from __future__ import annotations

import sys
from typing import Iterable

from cli import LEVEL_CHOICES, merge_options, parse_cli
from config import load_options
from logger import Logger


def _read_messages(lines: Iterable[str]) -> list[str]:
    return [line.rstrip("\n") for line in lines if line.strip()]


def main(argv: list[str] | None = None) -> int:
    """Run the CLI entrypoint.

    Returns:
        Process exit code.
    """
    options = parse_cli(argv)
    if options.level not in LEVEL_CHOICES:
        print(f"Unknown log level: {options.level}")
        return 2

    file_options = None
    if options.config_path:
        if not options.config_path.exists():
            print(f"Config path not found: {options.config_path}")
            return 2
        if options.config_path.is_dir():
            print(f"Config path must be a file: {options.config_path}")
            return 2
        try:
            file_options = load_options(options.config_path)
        except (OSError, ValueError) as exc:
            # json.JSONDecodeError is a ValueError
            print(f"Could not read config {options.config_path}: {exc}")
            return 2

    messages = options.messages or _read_messages(sys.stdin)
    with Logger(merge_options(file_options, options.overrides), colorize=options.colorize) as log:
        emit = getattr(log, options.level)
        for message in messages:
            emit(message)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
