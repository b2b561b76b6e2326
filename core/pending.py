"""File sink lifecycle states and buffered lines."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from core.levels import LogLevel


class FileSinkState(Enum):
    """Lifecycle of the file destination. DISABLED has no way out."""

    UNOPENED = "unopened"
    BUFFERING = "buffering"
    WRITING = "writing"
    DISABLED = "disabled"


@dataclass(frozen=True)
class PendingLine:
    """A file-bound event held until a writable handle exists."""

    level: LogLevel
    message: str
    created: datetime
