"""Interchangeable in-memory and file-backed loggers."""

from .interfaces import ILogger, ILogSink, record, history
from .adapters import InMemoryAdapter, FileAdapter, StdoutAdapter
from .handlers import CheckHandler, HistoryMismatch, TEST_MESSAGES

__version__ = "0.1.0"

__all__ = [
    'ILogger',
    'ILogSink',
    'record',
    'history',
    'InMemoryAdapter',
    'FileAdapter',
    'StdoutAdapter',
    'CheckHandler',
    'HistoryMismatch',
    'TEST_MESSAGES',
]
