"""File-backed logger adapter.

Every ``record`` is written, flushed and fsync'd before returning, and
``history`` re-reads the file from the start through a fresh handle.
The file is the only copy of the history; nothing is cached in memory.
"""

import os
from typing import Optional, TextIO

from ..interfaces import ILogger

LINE_TERMINATORS = ("\n", "\r")


class FileAdapter:
    """Adapter for line-per-message logging to a local file."""

    def __init__(
        self,
        path: str,
        truncate: bool = True,
        encoding: str = "utf-8"
    ):
        self._path = os.fspath(path)
        self._encoding = encoding
        # Raises OSError (missing dir, permissions) before anything is logged
        self._file: Optional[TextIO] = open(
            self._path,
            "w" if truncate else "a",
            encoding=encoding,
            newline="\n"
        )
        # Terminate a dangling last line so the next record starts fresh
        if not truncate and not self._ends_with_newline():
            self._file.write("\n")
            self._file.flush()

    def _ends_with_newline(self) -> bool:
        """True if the file is empty or its last byte is a newline."""
        with open(self._path, "rb") as f:
            f.seek(0, os.SEEK_END)
            if f.tell() == 0:
                return True
            f.seek(-1, os.SEEK_END)
            return f.read(1) == b"\n"

    @property
    def path(self) -> str:
        """Backing file path."""
        return self._path

    @property
    def closed(self) -> bool:
        """True once the write handle is released."""
        return self._file is None or self._file.closed

    def record(self, message: str) -> None:
        """Write message as one line and force it to disk."""
        if any(term in message for term in LINE_TERMINATORS):
            raise ValueError(
                f"message must not contain a line terminator: {message!r}"
            )
        if self.closed:
            raise ValueError(f"I/O operation on closed logger: {self._path}")

        self._file.write(message + "\n")
        self._file.flush()
        os.fsync(self._file.fileno())

    def history(self) -> list[str]:
        """Read all messages back from the file."""
        with open(self._path, "r", encoding=self._encoding, newline="") as f:
            return [line.rstrip("\r\n") for line in f]

    def close(self) -> None:
        """Close the write handle, keeping the file."""
        if self._file is None:
            return
        self._file.close()
        self._file = None

    def __enter__(self) -> "FileAdapter":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"FileAdapter({self._path!r})"
