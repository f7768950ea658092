"""Handler that exercises loggers and checks their history."""

from typing import Iterable, Optional, Sequence
from ..interfaces import ILogger, ILogSink

TEST_MESSAGES = (
    "Hello, World!",
    "abracadabra",
    "Sayonara!",
)


class HistoryMismatch(Exception):
    """A logger reported a history different from what was recorded."""

    def __init__(self, name: str, expected: list[str], observed: list[str]):
        self.name = name
        self.expected = expected
        self.observed = observed
        super().__init__(
            f"{name}: expected: {expected}; but observed: {observed}"
        )


class CheckHandler:
    """Feeds identical messages to every logger and verifies history."""

    def __init__(self, loggers: Sequence[ILogger], logger: ILogSink):
        self.loggers = tuple(loggers)
        self.logger = logger

    def record_all(self, messages: Iterable[str]) -> None:
        """Record each message on every logger, in collection order."""
        for message in messages:
            for target in self.loggers:
                target.record(message)
            self.logger.log("info", f"Recorded {message!r}")

    def snapshot(self) -> list[list[str]]:
        """Current history of every logger, in collection order."""
        return [target.history() for target in self.loggers]

    def verify(
        self,
        expected: Sequence[str],
        baselines: Optional[Sequence[Sequence[str]]] = None
    ) -> None:
        """Compare each logger's history against baseline + expected."""
        expected = list(expected)
        if baselines is None:
            baselines = [[] for _ in self.loggers]

        for target, baseline in zip(self.loggers, baselines):
            name = type(target).__name__
            wanted = list(baseline) + expected
            observed = target.history()

            if observed != wanted:
                self.logger.log("error", f"{name} history diverged")
                raise HistoryMismatch(name, wanted, observed)

            self.logger.log(
                "info", f"{name} reproduced {len(observed)} messages"
            )

    def handle(
        self,
        messages: Sequence[str] = TEST_MESSAGES,
        keep_existing: bool = False
    ) -> None:
        """Record messages, then verify every logger.

        With keep_existing, whatever each logger already holds is taken
        as its baseline and the new messages must follow it.
        """
        messages = list(messages)
        self.logger.log(
            "info",
            f"Checking {len(self.loggers)} loggers "
            f"with {len(messages)} messages"
        )
        baselines = self.snapshot() if keep_existing else None
        self.record_all(messages)
        self.verify(messages, baselines)
