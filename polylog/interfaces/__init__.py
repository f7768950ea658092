"""Interface definitions for polylog adapters."""

from .i_logger import ILogger, record, history
from .i_log_sink import ILogSink, LEVELS, QUIET_LEVELS

__all__ = [
    'ILogger',
    'ILogSink',
    'LEVELS',
    'QUIET_LEVELS',
    'record',
    'history',
]
