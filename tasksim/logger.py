"""Timestamped logging to a file and to a text stream."""

from __future__ import annotations

import sys
import threading
import time
from collections.abc import Callable
from os import PathLike
from typing import IO

DEFAULT_LOG_PATH = "scheduler.log"


def format_log_line(timestamp: float, message: str) -> str:
    """Return ``message`` prefixed by the local time of ``timestamp`` in brackets."""
    return f"[{time.ctime(timestamp)}] {message}"


class Logger:
    """Writes each message to a log file and echoes it to a stream.

    The log file is truncated when the logger is created. Pass ``path=None``
    to log to the stream only.
    """

    def __init__(
        self,
        path: str | PathLike[str] | None = DEFAULT_LOG_PATH,
        stream: IO[str] | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._file: IO[str] | None = (
            open(path, "w", encoding="utf-8") if path is not None else None
        )
        self._stream = stream if stream is not None else sys.stdout
        self._clock = clock
        self._lock = threading.Lock()

    def log(self, message: str) -> None:
        """Write one timestamped line to the file and the stream."""
        line = format_log_line(self._clock(), message) + "\n"
        with self._lock:
            if self._file is not None:
                self._file.write(line)
            self._stream.write(line)

    def close(self) -> None:
        """Close the log file; the stream is left open."""
        with self._lock:
            if self._file is not None:
                self._file.close()

    def __enter__(self) -> Logger:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()