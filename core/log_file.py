"""Append-only log file handle."""

from __future__ import annotations

from pathlib import Path
from typing import TextIO


def ensure_log_directory(directory: Path) -> Path:
    """Create the log directory if missing.

    Raises:
        OSError: When the directory cannot be created or is not a directory.
    """
    directory.mkdir(parents=True, exist_ok=True)
    if not directory.is_dir():
        raise NotADirectoryError(f"Not a directory: {directory}")
    return directory


class LogFile:
    """Auto-flushing UTF-8 log file opened in append mode."""

    def __init__(self, path: Path) -> None:
        self.path = path
        self._handle: TextIO | None = None

    @property
    def is_open(self) -> bool:
        return self._handle is not None and not self._handle.closed

    def open(self) -> None:
        """Open the file for appending; raises OSError on failure.

        Text that cannot be encoded is written as backslash escapes.
        """
        if self.is_open:
            return
        self._handle = self.path.open("a", encoding="utf-8", errors="backslashreplace")

    def write_line(self, line: str) -> None:
        """Append one line and flush it to disk."""
        if self._handle is None:
            raise ValueError(f"Log file is not open: {self.path}")
        self._handle.write(line + "\n")
        self._handle.flush()

    def close(self) -> None:
        handle, self._handle = self._handle, None
        if handle is not None and not handle.closed:
            handle.close()
