"""Diagnostic sink for check progress and failures."""

from typing import Protocol

# Levels emitted by CheckHandler, lowest first
LEVELS = ("info", "warn", "error")

# Dropped by a quiet sink; divergence is always reported
QUIET_LEVELS = ("info",)


class ILogSink(Protocol):
    """Receives progress of a logger check.

    ``level`` is one of ``LEVELS``. Per-message recording and per-logger
    success are ``info``; a diverging history is ``error``.
    """

    def log(self, level: str, message: str) -> None:
        """Emit one diagnostic line."""
        ...
