"""Colored console output."""

from __future__ import annotations

import sys
from contextlib import contextmanager
from typing import Iterator, TextIO

from colorama import Fore, Style, just_fix_windows_console

from core.levels import LogLevel

just_fix_windows_console()

LEVEL_COLORS = {
    LogLevel.TRACE: Fore.LIGHTBLACK_EX,
    LogLevel.DEBUG: Fore.WHITE,
    LogLevel.INFO: Fore.LIGHTWHITE_EX,
    LogLevel.NOTICE: Fore.BLUE,
    LogLevel.WARN: Fore.YELLOW,
    LogLevel.ERROR: Fore.RED,
    LogLevel.CRITICAL: Fore.MAGENTA,
    LogLevel.FATAL: Style.BRIGHT + Fore.RED,
}


@contextmanager
def console_color(stream: TextIO, color: str) -> Iterator[TextIO]:
    """Switch the stream to ``color`` for one block, then reset it."""
    stream.write(color)
    try:
        yield stream
    finally:
        stream.write(Style.RESET_ALL)


def write_console_line(
    line: str,
    level: LogLevel,
    stream: TextIO | None = None,
    colorize: bool = True,
) -> None:
    """Write a formatted line to the console in the level's color.

    Characters the stream cannot encode are replaced. Raises OSError or
    ValueError when the stream itself is unusable.
    """
    target = stream or sys.stdout
    line = _encodable(line, target)
    if colorize:
        with console_color(target, LEVEL_COLORS[level]):
            target.write(line)
        target.write("\n")
    else:
        print(line, file=target)
    target.flush()


def _encodable(text: str, stream: TextIO) -> str:
    encoding = getattr(stream, "encoding", None)
    if not encoding:
        return text
    return text.encode(encoding, "replace").decode(encoding)
