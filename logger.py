"""Dual-sink logger with per-destination level filtering."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Callable, List, TextIO, Tuple

from config.loader import resolve_options
from config.models import LoggerOptions, LoggerSettings
from core.console import write_console_line
from core.formatting import format_line, log_file_name, with_error_detail
from core.levels import LogLevel, passes
from core.log_file import LogFile, ensure_log_directory
from core.pending import FileSinkState, PendingLine

ErrorDetail = BaseException | str | None

_BUFFERED_STATES = (FileSinkState.UNOPENED, FileSinkState.BUFFERING)


class Logger:
    """Leveled logger writing to the console and a timestamped log file.

    Events bound for the file are queued while no writable handle exists.
    The queue is flushed in order once the file opens, or dropped for good
    (disabling file logging) when it grows past ``buffer_limit``. Errors never
    reach the caller; they are reported through the logger itself.

    Not thread-safe: callers logging from several threads must serialize
    access to the instance.
    """

    def __init__(
        self,
        options: LoggerOptions | None = None,
        *,
        stream: TextIO | None = None,
        colorize: bool = True,
        open_file: bool = True,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._stream = stream
        self._colorize = colorize
        self._clock = clock
        self._pending: List[PendingLine] = []
        self._file: LogFile | None = None
        self._log_path: Path | None = None
        self._state = FileSinkState.UNOPENED
        self._settings, notes = resolve_options(options)

        self.debug("Initializing logger")
        # Reported only now that both levels are known.
        for note in notes:
            self.warn(note)

        if self._settings.file_level == LogLevel.DISABLED:
            self._disable_file()
        elif open_file:
            self.open_file()
        else:
            self._state = FileSinkState.BUFFERING

        self.debug(
            f"Logger initialized with console level {self._settings.console_level.name} "
            f"and file level {self._settings.file_level.name}"
        )
        if self._state is FileSinkState.DISABLED:
            self.info("File logging is DISABLED")
        if self._settings.console_level == LogLevel.DISABLED:
            self.info("Console logging is DISABLED")

    def __enter__(self) -> "Logger":
        return self

    def __exit__(self, *_exc: object) -> None:
        self.close()

    @property
    def settings(self) -> LoggerSettings:
        return self._settings

    @property
    def state(self) -> FileSinkState:
        return self._state

    @property
    def log_path(self) -> Path | None:
        """Path of the log file, once one has been opened."""
        return self._log_path

    @property
    def pending(self) -> Tuple[PendingLine, ...]:
        return tuple(self._pending)

    def set_stream(self, stream: TextIO | None) -> None:
        self._stream = stream

    def open_file(self) -> bool:
        """Create the log directory and open a new log file.

        Queued lines are flushed once the file is open. Does nothing once
        file logging is disabled.

        Returns:
            True when the file sink is writing.
        """
        if self._state is FileSinkState.WRITING:
            return True
        if self._state is FileSinkState.DISABLED:
            return False

        directory = self._settings.log_directory
        self.debug(f"Logging directory set to {directory}")
        if self._state is FileSinkState.DISABLED:
            return False
        try:
            ensure_log_directory(directory)
        except OSError as exc:
            self._disable_file()
            self.error(f"Could not create the log directory {directory}, file logging disabled", exc)
            return False

        log_file = LogFile(directory / log_file_name(self._clock()))
        try:
            log_file.open()
        except OSError as exc:
            self._disable_file()
            self.error(f"Could not open the log file {log_file.path}, file logging disabled", exc)
            return False

        self._file = log_file
        self._log_path = log_file.path
        self._state = FileSinkState.WRITING
        self._drain()
        if self._state is FileSinkState.WRITING:
            self.debug(f"Writing logs to {log_file.path}")
        return self._state is FileSinkState.WRITING

    def close(self) -> None:
        """Flush what can be flushed and release the log file for good."""
        if self._state is FileSinkState.DISABLED:
            return
        self._drain()
        self._disable_file()

    def trace(self, message: str, detail: ErrorDetail = None) -> None:
        self.log(LogLevel.TRACE, with_error_detail(message, detail))

    def debug(self, message: str, detail: ErrorDetail = None) -> None:
        self.log(LogLevel.DEBUG, with_error_detail(message, detail))

    def info(self, message: str, detail: ErrorDetail = None) -> None:
        self.log(LogLevel.INFO, with_error_detail(message, detail))

    def notice(self, message: str, detail: ErrorDetail = None) -> None:
        self.log(LogLevel.NOTICE, with_error_detail(message, detail))

    def warn(self, message: str, detail: ErrorDetail = None) -> None:
        self.log(LogLevel.WARN, with_error_detail(message, detail))

    warning = warn

    def error(self, message: str, detail: ErrorDetail = None) -> None:
        self.log(LogLevel.ERROR, with_error_detail(message, detail))

    def critical(self, message: str, detail: ErrorDetail = None) -> None:
        self.log(LogLevel.CRITICAL, with_error_detail(message, detail))

    def fatal(self, message: str, detail: ErrorDetail = None) -> None:
        self.log(LogLevel.FATAL, with_error_detail(message, detail))

    def log(self, level: int, message: str) -> None:
        """Log ``message`` at ``level`` to every destination that accepts it."""
        try:
            level = LogLevel(level)
        except ValueError:
            return
        if level <= LogLevel.DISABLED or level >= LogLevel.ALL:
            return

        now = self._clock()
        line = format_line(level, message, now)

        if passes(level, self._settings.file_level):
            if self._state is FileSinkState.WRITING:
                self._write_file(line)
            elif self._state in _BUFFERED_STATES:
                self._pending.append(PendingLine(level, message, now))
                self._drain()

        if passes(level, self._settings.console_level):
            try:
                write_console_line(line, level, self._stream, self._colorize)
            except (OSError, ValueError) as exc:
                self._report_console_failure(exc, now)

    def _report_console_failure(self, exc: Exception, when: datetime) -> None:
        # File only; the console just failed.
        if self._state is not FileSinkState.WRITING or not passes(LogLevel.ERROR, self._settings.file_level):
            return
        self._write_file(format_line(LogLevel.ERROR, f"Writing to the console failed: {exc}", when))

    def _drain(self) -> None:
        if not self._pending:
            return
        limit = self._settings.buffer_limit
        if len(self._pending) > limit:
            dropped = len(self._pending)
            self._disable_file()
            self.warn(f"Log buffer limit of {limit} exceeded, {dropped} line(s) dropped, file logging disabled")
            return
        if self._state is not FileSinkState.WRITING:
            return
        pending, self._pending = self._pending, []
        for item in pending:
            if not self._write_file(format_line(item.level, item.message, item.created)):
                return

    def _write_file(self, line: str) -> bool:
        if self._file is None:
            return False
        try:
            self._file.write_line(line)
        except (OSError, ValueError) as exc:
            self._disable_file()
            self.error("Writing to the log file failed, file logging disabled", exc)
            return False
        return True

    def _disable_file(self) -> None:
        self._state = FileSinkState.DISABLED
        self._pending.clear()
        log_file, self._file = self._file, None
        if log_file is None:
            return
        try:
            log_file.close()
        except OSError as exc:
            self.error(f"Closing the log file {log_file.path} failed", exc)
