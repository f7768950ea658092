"""polylog - Main Entry Point."""

import argparse
import sys
from typing import Optional

from . import config
from .adapters import InMemoryAdapter, FileAdapter, StdoutAdapter
from .handlers import CheckHandler, HistoryMismatch, TEST_MESSAGES

# Table-driven logger construction, in collection order
LOGGER_FACTORIES = {
    'memory': lambda outfile, append: InMemoryAdapter(),
    'file': lambda outfile, append: FileAdapter(outfile, truncate=not append),
}


def parse_args(argv: Optional[list[str]]) -> argparse.Namespace:
    ap = argparse.ArgumentParser(
        prog="polylog",
        description="Record test messages into every logger and verify them."
    )
    ap.add_argument(
        "outfile", nargs="?", default=config.OUTFILE,
        help=f"file for the file-backed logger (default: {config.OUTFILE})"
    )
    ap.add_argument(
        "--append", action="store_true", default=config.APPEND,
        help="keep existing file content instead of truncating"
    )
    ap.add_argument(
        "--empty", action="store_true",
        help="record no messages; every history must be empty"
    )
    ap.add_argument(
        "--quiet", action="store_true", default=config.QUIET,
        help="only print warnings and errors"
    )
    return ap.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> int:
    """Build loggers, run the check, return process exit status."""
    args = parse_args(argv)
    logger = StdoutAdapter(quiet=args.quiet)

    # Mount loggers; any open failure is fatal before recording
    loggers = []
    try:
        for factory in LOGGER_FACTORIES.values():
            loggers.append(factory(args.outfile, args.append))
    except OSError as e:
        print(f"ERROR: Failed to open file: {args.outfile}: {e}",
              file=sys.stderr)
        _close_all(loggers)
        return 1

    messages = [] if args.empty else list(TEST_MESSAGES)
    handler = CheckHandler(loggers, logger)

    try:
        handler.handle(messages, keep_existing=args.append)
    except HistoryMismatch as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"ERROR: I/O on {args.outfile} failed: {e}", file=sys.stderr)
        return 1
    finally:
        _close_all(loggers)

    logger.log("info", f"All loggers agree; output in {args.outfile}")
    return 0


def _close_all(loggers: list) -> None:
    for target in loggers:
        close = getattr(target, "close", None)
        if close is not None:
            close()


if __name__ == "__main__":
    sys.exit(main())
