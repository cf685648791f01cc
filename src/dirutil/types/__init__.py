"""Type definitions and protocols for dirutil.

This package provides:
- Data models (dataclasses)
- Protocol definitions (structural subtyping interfaces)
- Type aliases (PEP 695 modern syntax)
"""

from dirutil.types.aliases import PathInput, ProgressCallback
from dirutil.types.models import (
    CopyRequest,
    CopyStats,
    SizeMode,
    SizeOptions,
    SizeRequest,
)
from dirutil.types.protocols import ExecutionContext, PathUtil

__all__ = [
    # Type aliases
    "PathInput",
    "ProgressCallback",
    # Data models
    "CopyRequest",
    "CopyStats",
    "SizeMode",
    "SizeOptions",
    "SizeRequest",
    # Protocols
    "ExecutionContext",
    "PathUtil",
]
