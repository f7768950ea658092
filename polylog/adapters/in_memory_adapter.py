"""In-memory logger adapter."""

from ..interfaces import ILogger


class InMemoryAdapter:
    """Adapter keeping log messages in a process-local list."""

    def __init__(self):
        self._messages: list[str] = []

    def record(self, message: str) -> None:
        """Append message to memory."""
        self._messages.append(message)

    def history(self) -> list[str]:
        """Return a copy of recorded messages."""
        return list(self._messages)
