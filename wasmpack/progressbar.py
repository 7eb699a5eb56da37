"""User-facing status messages filtered by quietness and log level."""

from __future__ import annotations

import enum
import sys
from typing import TextIO

_WARN_MARK = ":-)"
_ERROR_MARK = ":-("


class LogLevel(enum.IntEnum):
    """Maximum level of messages to print; a higher value is more verbose."""

    ERROR = 0
    WARN = 1
    INFO = 2

    @classmethod
    def parse(cls, value: str) -> "LogLevel":
        """Parse one of ``error``, ``warn`` or ``info``."""
        levels = {"error": cls.ERROR, "warn": cls.WARN, "info": cls.INFO}
        try:
            return levels[value]
        except KeyError:
            raise ValueError(f"Unknown log-level: {value}") from None


class ProgressOutput:
    """Prints info, warning and error messages to standard error."""

    def __init__(
        self,
        quiet: bool = False,
        log_level: LogLevel = LogLevel.INFO,
        stream: TextIO | None = None,
    ) -> None:
        self.quiet = quiet
        self.log_level = LogLevel(log_level)
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stderr

    def _label(self, text: str) -> str:
        isatty = getattr(self.stream, "isatty", None)
        if isatty is not None and isatty():
            return f"\x1b[1m\x1b[2m{text}\x1b[0m"
        return text

    def _message(self, text: str) -> None:
        print(text, file=self.stream)

    def is_log_enabled(self, level: LogLevel) -> bool:
        """Whether messages of ``level`` are printed at the current log level."""
        return LogLevel(level) <= self.log_level

    def info(self, message: str) -> None:
        """Print an informational message."""
        if not self.quiet and self.is_log_enabled(LogLevel.INFO):
            self._message(f"{self._label('[INFO]')}: {message}")

    def warn(self, message: str) -> None:
        """Print a warning."""
        if not self.quiet and self.is_log_enabled(LogLevel.WARN):
            self._message(f"{self._label('[WARN]')}: {_WARN_MARK} {message}")

    def error(self, message: str) -> None:
        """Print an error; shown even when quiet."""
        if self.is_log_enabled(LogLevel.ERROR):
            self._message(f"{self._label('[ERR]')}: {_ERROR_MARK} {message}")


PBAR = ProgressOutput()