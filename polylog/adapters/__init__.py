"""Adapter implementations for polylog."""

from .in_memory_adapter import InMemoryAdapter
from .file_adapter import FileAdapter
from .stdout_adapter import StdoutAdapter

__all__ = [
    'InMemoryAdapter',
    'FileAdapter',
    'StdoutAdapter',
]
