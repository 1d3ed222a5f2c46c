"""Logging handlers for different output targets."""

from .file_handler import FileHandler
from .console_handler import ConsoleHandler

__all__ = ['FileHandler', 'ConsoleHandler']
