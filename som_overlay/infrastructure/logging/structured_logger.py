"""Structured logging with context propagation for overlay runs."""

import logging
import sys
import traceback
from typing import Dict, Any, Optional
from contextvars import ContextVar
from datetime import datetime, timezone

# Context variables for correlating records of one overlay run
run_context: ContextVar[Optional[str]] = ContextVar('run_id', default=None)
operation_context: ContextVar[Optional[str]] = ContextVar('operation', default=None)


def _utc_timestamp() -> str:
    return datetime.now(timezone.utc).replace(tzinfo=None).isoformat() + 'Z'


class StructuredLogger(logging.Logger):
    """Logger that attaches structured context to every record.

    Features:
    - Automatic context injection (run_id, operation)
    - Performance metrics logging
    - Full traceback capture for errors
    """

    def __init__(self, name: str):
        """Initialize structured logger.

        Args:
            name: Logger name (usually __name__)
        """
        super().__init__(name)
        self._context_fields: Dict[str, Any] = {}

    def _log(self, level, msg, args, exc_info=None, extra=None, stack_info=False, **kwargs):
        """Add context, performance and traceback fields to the record."""
        context = {
            'run_id': run_context.get(),
            'operation': operation_context.get(),
            'logger_name': self.name,
            'timestamp': _utc_timestamp(),
            **self._context_fields
        }
        context = {k: v for k, v in context.items() if v is not None}

        if extra and isinstance(extra, dict):
            extra = dict(extra)
            performance = extra.pop('performance', None)
            context.update(extra.pop('context', {}))
            traceback_str = extra.pop('traceback', None)
        else:
            extra = {}
            performance = None
            traceback_str = None

        if not traceback_str and exc_info:
            if isinstance(exc_info, bool):
                exc_info = sys.exc_info()
            elif isinstance(exc_info, BaseException):
                exc_info = (type(exc_info), exc_info, exc_info.__traceback__)
            if exc_info[0] is not None:
                traceback_str = ''.join(traceback.format_exception(*exc_info))

        extra.update({
            'context': context,
            'performance': performance,
            'traceback': traceback_str
        })

        super()._log(level, msg, args, exc_info=False, extra=extra,
                     stack_info=stack_info, **kwargs)

    def add_context(self, **fields):
        """Add persistent context fields to all future log messages."""
        self._context_fields.update(fields)

    def clear_context(self):
        """Clear all persistent context fields."""
        self._context_fields.clear()

    def log_performance(self, operation: str, duration: float, **metrics):
        """Log performance metrics for an operation.

        Args:
            operation: Operation name
            duration: Duration in seconds
            **metrics: Additional metrics (items_processed, n_hex, etc.)

        Example:
            logger.log_performance('map_overlay', 0.012,
                                   items_processed=100, n_hex=25)
        """
        performance_data = {
            'operation': operation,
            'duration_seconds': round(duration, 3),
            'timestamp': _utc_timestamp(),
            **metrics
        }

        if 'items_processed' in metrics and duration > 0:
            performance_data['items_per_second'] = round(
                metrics['items_processed'] / duration, 2
            )

        self.info(
            f"Performance: {operation} completed in {duration:.3f}s",
            extra={'performance': performance_data}
        )


# Global logger cache
_logger_cache: Dict[str, StructuredLogger] = {}


def get_logger(name: str) -> StructuredLogger:
    """Get or create a structured logger instance.

    Example:
        from som_overlay.infrastructure.logging import get_logger
        logger = get_logger(__name__)
    """
    if name in _logger_cache:
        return _logger_cache[name]

    # Temporarily set logger class
    original_class = logging.getLoggerClass()
    logging.setLoggerClass(StructuredLogger)

    try:
        logger = logging.getLogger(name)
        _logger_cache[name] = logger
        return logger
    finally:
        # Restore original logger class
        logging.setLoggerClass(original_class)
