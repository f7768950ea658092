"""Logger capability interface (adapter pattern)."""

from typing import Protocol


class ILogger(Protocol):
    """Interface for message loggers."""

    def record(self, message: str) -> None:
        """Append message to the backing store."""
        ...

    def history(self) -> list[str]:
        """Return all recorded messages, oldest first."""
        ...


def record(logger: ILogger, message: str) -> None:
    """Record message on any logger."""
    logger.record(message)


def history(logger: ILogger) -> list[str]:
    """Fetch history from any logger."""
    return logger.history()
