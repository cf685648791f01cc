"""Shared utilities: logging setup and formatting helpers."""

from dirutil.utils.formatting import format_count, format_size
from dirutil.utils.logging import (
    CorrelationIDFilter,
    clear_correlation_id,
    configure_logging,
    correlation_scope,
    generate_correlation_id,
    get_correlation_id,
    get_logger,
    log_with_context,
    set_correlation_id,
)

__all__ = [
    "CorrelationIDFilter",
    "clear_correlation_id",
    "configure_logging",
    "correlation_scope",
    "format_count",
    "format_size",
    "generate_correlation_id",
    "get_correlation_id",
    "get_logger",
    "log_with_context",
    "set_correlation_id",
]
