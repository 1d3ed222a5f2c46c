"""Structured logging infrastructure for overlay runs."""

from .structured_logger import StructuredLogger, get_logger, run_context, operation_context
from .decorators import log_operation
from .setup import setup_logging, setup_simple_logging

__all__ = [
    'StructuredLogger',
    'get_logger',
    'run_context',
    'operation_context',
    'log_operation',
    'setup_logging',
    'setup_simple_logging',
]
