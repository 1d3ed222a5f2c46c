"""Setup and configuration for the structured logging system."""

import logging
import sys
from typing import Optional, Any

from .structured_logger import get_logger, run_context
from .handlers import ConsoleHandler, FileHandler


def _reset_root(log_level: str) -> logging.Logger:
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    # Remove existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    return root_logger


def setup_logging(config: Optional[Any] = None,
                  run_id: Optional[str] = None,
                  log_file: Optional[str] = None,
                  console: bool = True,
                  log_level: Optional[str] = None):
    """Configure the structured logging system.

    Args:
        config: Object with a dot-notation ``get`` (defaults to the overlay config)
        run_id: Identifier attached to every record of this run
        log_file: Optional log file path (uses config default if not provided)
        console: Whether to enable console logging
        log_level: Minimum log level (uses config default if not provided)
    """
    if config is None:
        from ...config.som import get_overlay_config
        config = get_overlay_config()

    log_level = log_level or config.get('logging_config.level', 'INFO')
    root_logger = _reset_root(log_level)
    level = root_logger.level

    if console:
        console_handler = ConsoleHandler(
            use_colors=sys.stderr.isatty(),
            show_context=config.get('logging_config.show_context', True)
        )
        console_handler.setLevel(level)
        root_logger.addHandler(console_handler)

    log_file = log_file or config.get('logging_config.log_file')
    if log_file:
        file_handler = FileHandler(
            filename=str(log_file),
            max_bytes=config.get('logging_config.max_file_size', 10 * 1024 * 1024),
            backup_count=config.get('logging_config.backup_count', 5),
        )
        root_logger.addHandler(file_handler)

    if run_id:
        run_context.set(run_id)

    logger = get_logger(__name__)
    logger.info(
        "Structured logging system initialized",
        extra={
            'context': {
                'log_level': log_level,
                'handlers': {'console': console, 'file': str(log_file) if log_file else None}
            }
        }
    )


def setup_simple_logging(log_level: str = 'INFO'):
    """Setup console-only logging for testing/debugging.

    Args:
        log_level: Minimum log level
    """
    root_logger = _reset_root(log_level)

    console_handler = ConsoleHandler(show_context=True)
    console_handler.setLevel(root_logger.level)
    root_logger.addHandler(console_handler)
