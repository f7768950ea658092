"""Stdout logging adapter."""

import sys
from datetime import datetime
from typing import Optional, TextIO

from ..interfaces import ILogSink, QUIET_LEVELS


class StdoutAdapter:
    """Adapter for stdout logging."""

    def __init__(self, stream: Optional[TextIO] = None, quiet: bool = False):
        self.stream = stream
        self.quiet = quiet

    def log(self, level: str, message: str) -> None:
        """Write log entry to stdout."""
        if self.quiet and level.lower() in QUIET_LEVELS:
            return

        timestamp = datetime.now().isoformat()
        print(
            f"[{timestamp}] {level.upper()}: {message}",
            file=self.stream or sys.stdout
        )
