"""Handlers for polylog."""

from .check_handler import CheckHandler, HistoryMismatch, TEST_MESSAGES

__all__ = [
    'CheckHandler',
    'HistoryMismatch',
    'TEST_MESSAGES',
]
