"""Structured logging helpers: log context fields and call tracing."""

import functools
import logging
import threading
import uuid
from typing import Any, Callable, Dict, Optional

# Thread-local storage for log context
_thread_local = threading.local()


def generate_correlation_id() -> str:
    """Generate a unique id for correlating the log lines of one operation.

    Returns:
        UUID string
    """
    return str(uuid.uuid4())


def get_log_context() -> Dict[str, Any]:
    """Return a copy of the fields currently attached to log records."""
    return dict(getattr(_thread_local, "context", {}))


class LogContext:
    """
    Context manager for adding structured fields to log records.

    Fields live in thread-local storage and are copied onto each record by
    _ContextFilter. Nested contexts add to the outer fields and restore them
    on exit.

    Example:
        with LogContext(submission_id=generate_correlation_id()):
            logger.info("Validating project")
    """

    def __init__(self, **fields: Any):
        """
        Initialize log context with custom fields.

        Args:
            **fields: Key-value pairs to add to log records
        """
        self.fields = fields
        self.previous_context: Optional[Dict[str, Any]] = None

    def __enter__(self):
        """Enter context and add fields to thread-local storage."""
        self.previous_context = get_log_context()
        _thread_local.context = {**self.previous_context, **self.fields}
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Exit context and restore the outer fields."""
        _thread_local.context = self.previous_context or {}


class _ContextFilter(logging.Filter):
    """Logging filter that copies context fields onto log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        for key, value in get_log_context().items():
            setattr(record, key, value)
        return True


def log_function_call(
    func: Optional[Callable] = None, *, include_args: bool = False, level: str = "DEBUG"
) -> Callable:
    """
    Decorator to log function entry and exit.

    Exceptions are logged with their traceback and re-raised.

    Args:
        func: Function to decorate (when used without arguments)
        include_args: Whether to include function arguments in logs
        level: Log level to use (DEBUG, INFO, WARNING, ERROR)

    Returns:
        Decorated function

    Example:
        @log_function_call
        def filter_projects(records, criteria):
            ...

        @log_function_call(include_args=True, level="INFO")
        def add(self, draft):
            ...
    """

    def decorator(f: Callable) -> Callable:
        @functools.wraps(f)
        def wrapper(*args, **kwargs):
            logger = logging.getLogger(f.__module__)
            log_level = getattr(logging, level.upper())

            if include_args:
                signature = ", ".join(
                    [repr(a) for a in args] + [f"{k}={v!r}" for k, v in kwargs.items()]
                )
                logger.log(log_level, f"Entering {f.__qualname__} with args: {signature}")
            else:
                logger.log(log_level, f"Entering {f.__qualname__}")

            try:
                result = f(*args, **kwargs)
            except Exception as e:
                logger.error(
                    f"Exception in {f.__qualname__}: {type(e).__name__}: {e}",
                    exc_info=True,
                )
                raise

            logger.log(log_level, f"Exiting {f.__qualname__}")
            return result

        return wrapper

    # Support both @log_function_call and @log_function_call(...)
    if func is None:
        return decorator
    return decorator(func)
