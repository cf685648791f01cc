"""Data models for dirutil.

This module defines the dataclasses passed between the facade, the execution
context and the filesystem engine.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dirutil.core.cancellation import CancellationToken


class SizeMode(str, Enum):
    """Enumeration for size calculation modes."""

    APPARENT = "apparent"  # Apparent size (file content size)
    DISK_USAGE = "disk_usage"  # Actual disk usage (considering filesystem blocks)


@dataclass(slots=True, frozen=True)
class SizeOptions:
    """Options controlling a directory size scan.

    ``progress`` receives the running total after each directory's direct
    files have been summed.
    """

    recursive: bool = True
    continue_on_error: bool = True
    progress: Callable[[int], None] | None = None
    mode: SizeMode = SizeMode.APPARENT


@dataclass(slots=True)
class CopyStats:
    """Summary of a recursive directory copy."""

    files_copied: int = 0
    files_skipped: int = 0
    directories_created: int = 0
    bytes_copied: int = 0

    def merge(self, other: CopyStats) -> None:
        """Accumulate another summary into this one."""
        self.files_copied += other.files_copied
        self.files_skipped += other.files_skipped
        self.directories_created += other.directories_created
        self.bytes_copied += other.bytes_copied


@dataclass(slots=True, frozen=True)
class SizeRequest:
    """Arguments of a size scan handed to an execution context."""

    directory: str
    options: SizeOptions
    token: CancellationToken


@dataclass(slots=True, frozen=True)
class CopyRequest:
    """Arguments of a directory copy handed to an execution context."""

    source_dir: str
    dest_dir: str
    overwrite: bool
    token: CancellationToken
