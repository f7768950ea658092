"""Configuration management."""

import os
import tempfile


def _flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in ("1", "true", "yes")


# Output Configuration
OUTFILE = os.getenv(
    "POLYLOG_OUTFILE",
    os.path.join(tempfile.gettempdir(), "outfile_python.txt")
)
APPEND = _flag("POLYLOG_APPEND")

# Diagnostics Configuration
QUIET = _flag("POLYLOG_QUIET")
