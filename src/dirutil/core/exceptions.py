"""Exception taxonomy for directory operations.

Operating-system errors (``PermissionError``, ``FileNotFoundError`` raised by
``os.scandir`` and friends) are never wrapped. The classes below are raised only
where an operation defines a condition of its own: a missing source or target,
a violated structural precondition, or a cooperative cancellation.
"""

from __future__ import annotations

from typing import Any


class DirUtilError(Exception):
    """Base exception for all directory utility errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:  # pyright: ignore[reportAny] # Flexible error context
        """Initialize DirUtilError.

        Args:
            message: Error message
            context: Additional context information for debugging
        """
        super().__init__(message)
        self.context: dict[str, Any] = context or {}  # pyright: ignore[reportAny] # Flexible error context


class DirectoryNotFoundError(DirUtilError, FileNotFoundError):
    """Raised when a directory an operation requires does not exist."""

    def __init__(self, message: str, path: str) -> None:
        """Initialize DirectoryNotFoundError.

        Args:
            message: Error message
            path: The missing directory
        """
        super().__init__(message, {"path": path})
        self.path: str = path


class StructuralViolationError(DirUtilError):
    """Raised when a directory layout does not satisfy an operation's preconditions."""


class UnexpectedFilesError(StructuralViolationError):
    """Raised when a directory expected to hold only a subdirectory contains files."""

    def __init__(self, path: str, file_count: int) -> None:
        super().__init__(
            f"Top-level directory '{path}' contains {file_count} file(s). Expected only one subdirectory.",
            {"path": path, "file_count": file_count},
        )
        self.path: str = path
        self.file_count: int = file_count


class SubdirectoryCountError(StructuralViolationError):
    """Raised when a directory does not contain exactly one subdirectory."""

    def __init__(self, path: str, found: int) -> None:
        super().__init__(
            f"Expected exactly one subdirectory in '{path}', found {found}.",
            {"path": path, "found": found},
        )
        self.path: str = path
        self.found: int = found


class DestinationExistsError(StructuralViolationError, FileExistsError):
    """Raised when a relocation target is already present."""

    def __init__(self, kind: str, path: str) -> None:
        """Initialize DestinationExistsError.

        Args:
            kind: Either "directory" or "file"
            path: The destination that already exists
        """
        super().__init__(
            f"Destination {kind} already exists: {path}",
            {"kind": kind, "path": path},
        )
        self.kind: str = kind
        self.path: str = path


class OperationCancelledError(DirUtilError):
    """Raised when a cooperative cancellation request is observed."""

    def __init__(self, message: str = "The operation was cancelled.") -> None:
        super().__init__(message)
