"""Unit tests for the check handler."""

import pytest
from unittest.mock import Mock, call
from polylog.adapters import InMemoryAdapter, FileAdapter
from polylog.handlers import CheckHandler, HistoryMismatch, TEST_MESSAGES
from polylog.interfaces import LEVELS


class DroppingLogger:
    """Logger that loses every other message."""

    def __init__(self):
        self.messages = []

    def record(self, message: str) -> None:
        self.messages.append(message)

    def history(self) -> list[str]:
        return self.messages[::2]


def test_test_messages_fixed():
    """Driver uses the three fixed test messages."""
    assert list(TEST_MESSAGES) == ["Hello, World!", "abracadabra", "Sayonara!"]


def test_check_handler_records_in_collection_order():
    """Each message goes to every logger before the next message."""
    calls = Mock()
    first, second = Mock(), Mock()
    first.record.side_effect = lambda m: calls.first(m)
    second.record.side_effect = lambda m: calls.second(m)

    handler = CheckHandler([first, second], Mock())
    handler.record_all(["a", "b"])

    assert calls.mock_calls == [
        call.first("a"), call.second("a"),
        call.first("b"), call.second("b"),
    ]


def test_check_handler_passes_real_loggers(tmp_path):
    """End-to-end: memory and file loggers reproduce test messages."""
    sink = Mock()
    with FileAdapter(tmp_path / "out.txt") as local:
        memory = InMemoryAdapter()
        handler = CheckHandler([memory, local], sink)

        handler.handle()

        assert memory.history() == list(TEST_MESSAGES)
        assert local.history() == list(TEST_MESSAGES)

    levels = {c.args[0] for c in sink.log.call_args_list}
    assert levels == {"info"}


def test_check_handler_empty_run(tmp_path):
    """No messages means every history is empty."""
    with FileAdapter(tmp_path / "out.txt") as local:
        handler = CheckHandler([InMemoryAdapter(), local], Mock())
        handler.handle([])

        assert local.history() == []


def test_check_handler_reports_mismatch():
    """Divergent history raises with both sequences."""
    sink = Mock()
    handler = CheckHandler([InMemoryAdapter(), DroppingLogger()], sink)

    with pytest.raises(HistoryMismatch) as exc_info:
        handler.handle()

    err = exc_info.value
    assert err.name == "DroppingLogger"
    assert err.expected == list(TEST_MESSAGES)
    assert err.observed == ["Hello, World!", "Sayonara!"]
    assert "expected: " in str(err)
    assert "; but observed: " in str(err)
    sink.log.assert_any_call("error", "DroppingLogger history diverged")


def test_check_handler_collection_is_fixed():
    """Mutating the source list after setup has no effect."""
    loggers = [InMemoryAdapter()]
    handler = CheckHandler(loggers, Mock())
    loggers.append(DroppingLogger())

    handler.handle()

    assert len(handler.loggers) == 1


def test_check_handler_keep_existing_uses_baseline(tmp_path):
    """Existing file lines are the baseline for the new messages."""
    path = tmp_path / "out.txt"
    path.write_text("earlier\n", encoding="utf-8")

    with FileAdapter(path, truncate=False) as local:
        handler = CheckHandler([InMemoryAdapter(), local], Mock())
        handler.handle(keep_existing=True)

        assert local.history() == ["earlier"] + list(TEST_MESSAGES)


def test_check_handler_without_baseline_rejects_existing(tmp_path):
    """Leftover lines diverge when no baseline is taken."""
    path = tmp_path / "out.txt"
    path.write_text("earlier\n", encoding="utf-8")

    with FileAdapter(path, truncate=False) as local:
        handler = CheckHandler([local], Mock())

        with pytest.raises(HistoryMismatch) as exc_info:
            handler.handle()

    assert exc_info.value.observed[0] == "earlier"


def test_check_handler_snapshot_is_per_logger():
    """Snapshot lists each logger's history in collection order."""
    first, second = InMemoryAdapter(), InMemoryAdapter()
    second.record("only here")
    handler = CheckHandler([first, second], Mock())

    assert handler.snapshot() == [[], ["only here"]]


def test_check_handler_emits_known_levels():
    """Every diagnostic uses a level the sinks understand."""
    sink = Mock()
    handler = CheckHandler([InMemoryAdapter(), DroppingLogger()], sink)

    with pytest.raises(HistoryMismatch):
        handler.handle()

    assert {c.args[0] for c in sink.log.call_args_list} <= set(LEVELS)
