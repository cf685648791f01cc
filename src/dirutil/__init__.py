"""dirutil - Directory tree utilities with cancellation and offloaded execution.

This package provides enumeration, size scanning, empty-directory pruning,
recursive copying and single-subdirectory collapsing, exposed through the
DirectoryUtil facade.
"""

from dirutil.core.cancellation import CancellationToken
from dirutil.core.directory_util import DirectoryUtil
from dirutil.core.exceptions import (
    DestinationExistsError,
    DirectoryNotFoundError,
    DirUtilError,
    OperationCancelledError,
    StructuralViolationError,
    SubdirectoryCountError,
    UnexpectedFilesError,
)
from dirutil.core.filesystem import normalize
from dirutil.types.models import CopyStats, SizeMode, SizeOptions

__all__ = [
    "CancellationToken",
    "CopyStats",
    "DestinationExistsError",
    "DirUtilError",
    "DirectoryNotFoundError",
    "DirectoryUtil",
    "OperationCancelledError",
    "SizeMode",
    "SizeOptions",
    "StructuralViolationError",
    "SubdirectoryCountError",
    "UnexpectedFilesError",
    "normalize",
]
