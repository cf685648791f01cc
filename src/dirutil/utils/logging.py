"""Logging setup with correlation ID tracking.

Every dirutil module logs through ``logging.getLogger(__name__)`` and attaches
structured fields with ``extra={...}``. This module wires handlers for
applications that want dirutil's output, and provides a ContextVar-based
correlation ID so the events of one operation can be grouped, including the
events emitted from a worker thread (``asyncio.to_thread`` copies context).
"""

import contextvars
import logging
import logging.handlers
import sys
import uuid
from collections.abc import Generator, Mapping
from contextlib import contextmanager
from pathlib import Path
from typing import Final, override

# Correlation ID context variable for grouping the events of one operation
# Automatically inherited by asyncio tasks and by asyncio.to_thread workers
correlation_id_var: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "dirutil_correlation_id",
    default=None,
)

# Log format constants
DEFAULT_LOG_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - [%(correlation_id)s] - %(message)s"

DEFAULT_MAX_LOG_BYTES: Final[int] = 10 * 1024 * 1024
DEFAULT_LOG_BACKUP_COUNT: Final[int] = 5


class CorrelationIDFilter(logging.Filter):
    """Logging filter that adds the correlation ID to log records.

    Records logged outside of any correlation scope get ``"N/A"``.
    """

    @override
    def filter(self, record: logging.LogRecord) -> bool:
        """Add correlation ID to log record from ContextVar.

        Args:
            record: Log record to enhance with correlation ID

        Returns:
            True to allow the record to be logged
        """
        correlation_id = correlation_id_var.get()
        record.correlation_id = correlation_id if correlation_id is not None else "N/A"
        return True


def configure_logging(
    *,
    log_level: str = "INFO",
    enable_console: bool = True,
    log_file: str | Path | None = None,
    log_format: str = DEFAULT_LOG_FORMAT,
    max_bytes: int = DEFAULT_MAX_LOG_BYTES,
    backup_count: int = DEFAULT_LOG_BACKUP_COUNT,
    logger_name: str = "dirutil",
) -> logging.Logger:
    """Configure dirutil logging with console and optional rotating file output.

    Handlers are attached to the ``dirutil`` logger rather than the root
    logger so embedding applications keep control of their own logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        enable_console: Enable console output handler
        log_file: Optional path of a size-rotated log file
        log_format: Format string shared by all handlers
        max_bytes: Size threshold for log file rotation
        backup_count: Number of rotated log files to keep
        logger_name: Logger to configure

    Returns:
        The configured logger

    Example:
        >>> configure_logging(log_level="DEBUG")
        >>> logger = get_logger("dirutil.example")
        >>> logger.debug("Deleting directory", extra={"path": "/tmp/x"})
    """
    logger = logging.getLogger(logger_name)

    level = getattr(logging, log_level.upper(), logging.INFO)
    logger.setLevel(level)

    # Remove existing handlers to avoid duplicates
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    correlation_filter = CorrelationIDFilter()
    formatter = logging.Formatter(log_format)

    if enable_console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)
        console_handler.addFilter(correlation_filter)
        logger.addHandler(console_handler)

    if log_file is not None:
        filepath = Path(log_file)
        filepath.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            str(filepath),
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        file_handler.addFilter(correlation_filter)
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the specified module.

    Args:
        name: Logger name (typically __name__ from calling module)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


def set_correlation_id(correlation_id: str) -> None:
    """Set the correlation ID for the current context.

    Args:
        correlation_id: Unique identifier for correlation (e.g., UUID)
    """
    _ = correlation_id_var.set(correlation_id)


def get_correlation_id() -> str | None:
    """Get the current correlation ID from context.

    Returns:
        Current correlation ID or None if not set
    """
    return correlation_id_var.get()


def clear_correlation_id() -> None:
    """Clear the correlation ID from the current context."""
    _ = correlation_id_var.set(None)


def generate_correlation_id(prefix: str | None = None) -> str:
    """Generate a new correlation ID without setting it.

    Args:
        prefix: Optional prefix, joined to the UUID with a hyphen

    Returns:
        The generated correlation ID
    """
    correlation_id = uuid.uuid4().hex[:12]
    return f"{prefix}-{correlation_id}" if prefix else correlation_id


@contextmanager
def correlation_scope(prefix: str | None = None) -> Generator[str, None, None]:
    """Run a block under a correlation ID, reusing an enclosing one if set.

    Args:
        prefix: Prefix for a newly generated ID

    Yields:
        The correlation ID in effect inside the block
    """
    existing = correlation_id_var.get()
    if existing is not None:
        yield existing
        return

    correlation_id = generate_correlation_id(prefix)
    reset_token = correlation_id_var.set(correlation_id)
    try:
        yield correlation_id
    finally:
        correlation_id_var.reset(reset_token)


def log_with_context(
    logger: logging.Logger,
    level: int,
    message: str,
    *,
    extra: Mapping[str, object] | None = None,
) -> None:
    """Log a message with additional context fields.

    Automatically includes the correlation ID from the ContextVar.

    Args:
        logger: Logger instance to use
        level: Logging level (e.g., logging.INFO)
        message: Log message
        extra: Additional context fields to include in log

    Example:
        >>> log_with_context(
        ...     logger,
        ...     logging.INFO,
        ...     "Size scan complete",
        ...     extra={"directory": "/data", "total_bytes": 4096},
        ... )
    """
    context = dict(extra) if extra else {}

    correlation_id = get_correlation_id()
    if correlation_id:
        context["correlation_id"] = correlation_id

    logger.log(level, message, extra=context)
