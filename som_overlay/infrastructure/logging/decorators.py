"""Decorators for automatic logging and error capture."""

import functools
import time
import inspect
from typing import Callable, Any, Optional, TypeVar

from .structured_logger import get_logger, operation_context

# Type variable for decorated functions
F = TypeVar('F', bound=Callable[..., Any])


def _describe(value: Any) -> Any:
    """Summarize an argument without dumping large arrays into the log."""
    if isinstance(value, (str, int, float, bool)) or value is None:
        return value
    shape = getattr(value, 'shape', None)
    if shape is not None:
        return f"<{type(value).__name__} shape={tuple(shape)}>"
    return f"<{type(value).__name__}>"


def log_operation(operation_name: Optional[str] = None,
                  log_args: bool = False,
                  log_performance: bool = True):
    """Decorator to log operation execution and capture errors.

    Args:
        operation_name: Custom operation name (defaults to function name)
        log_args: Whether to log a summary of the function arguments
        log_performance: Whether to log performance metrics

    Example:
        @log_operation("map_overlay")
        def map_overlay(grid, data, additional):
            ...
    """
    def decorator(func: F) -> F:
        name = operation_name or func.__name__
        logger = get_logger(func.__module__)

        @functools.wraps(func)
        def wrapper(*args, **kwargs) -> Any:
            start_time = time.time()
            context = {'operation': name}

            if log_args:
                bound_args = inspect.signature(func).bind(*args, **kwargs)
                bound_args.apply_defaults()
                context['arguments'] = {
                    arg_name: _describe(arg_value)
                    for arg_name, arg_value in bound_args.arguments.items()
                }

            token = operation_context.set(name)
            try:
                logger.debug(f"Starting {name}", extra={'context': context})
                result = func(*args, **kwargs)

                if log_performance:
                    logger.log_performance(name, time.time() - start_time,
                                           status='success')
                else:
                    logger.info(f"Completed {name}", extra={'context': context})
                return result

            except Exception as e:
                duration = time.time() - start_time
                logger.error(
                    f"Failed {name}: {str(e)}",
                    exc_info=True,
                    extra={
                        'context': context,
                        'performance': {
                            'duration': duration,
                            'status': 'failed',
                            'error_type': type(e).__name__
                        }
                    }
                )
                raise
            finally:
                operation_context.reset(token)

        return wrapper  # type: ignore
    return decorator
