"""Size calculation for directory trees.

The scan keeps an explicit LIFO stack of directories still to be enumerated
instead of recursing, so memory and call depth stay bounded on arbitrarily
deep trees.
"""

from __future__ import annotations

import logging
import os

from dirutil.core.cancellation import CancellationToken, ensure_token
from dirutil.types.aliases import PathInput
from dirutil.types.models import SizeMode, SizeOptions
from dirutil.utils.formatting import format_size
from dirutil.utils.logging import log_with_context

logger = logging.getLogger(__name__)

# st_blocks is counted in 512-byte units regardless of the filesystem block size
_STAT_BLOCK_SIZE = 512

__all__ = ["SizeCalculator", "SizeMode", "SizeOptions"]


class SizeCalculator:
    """Calculator for the total size of the files in a directory tree.

    Provides:
    - Stack-based traversal (no recursion)
    - A progress callback invoked once per scanned directory
    - A continue-on-error policy for unreadable directories
    - Apparent size or disk usage accounting
    - Cooperative cancellation between entries
    """

    def __init__(self, log: logging.Logger | None = None) -> None:
        """Initialize the size calculator.

        Args:
            log: Logger receiving scan events (defaults to this module's)
        """
        self._logger: logging.Logger = log if log is not None else logger

    def calculate(
        self,
        directory: PathInput,
        options: SizeOptions | None = None,
        token: CancellationToken | None = None,
    ) -> int:
        """Calculate the total size of the files under ``directory``.

        Args:
            directory: Root directory to measure
            options: Scan options (defaults to ``SizeOptions()``)
            token: Cancellation token checked before each directory and file

        Returns:
            Total size in bytes of every successfully scanned directory.
            Zero if ``directory`` does not exist.

        Raises:
            OperationCancelledError: If ``token`` is cancelled during the scan
            OSError: If a directory cannot be scanned and
                ``options.continue_on_error`` is False
        """
        root = os.fspath(directory)
        if not os.path.isdir(root):
            return 0

        opts = options or SizeOptions()
        cancel = ensure_token(token)

        total_size = 0
        scanned = 0
        skipped = 0
        outcome = "skipping" if opts.continue_on_error else "aborting scan"

        directories_to_scan: list[str] = [root]

        while directories_to_scan:
            cancel.raise_if_cancelled()

            current_dir = directories_to_scan.pop()

            try:
                with os.scandir(current_dir) as it:
                    entries = list(it)

                directory_size = 0
                subdirectories: list[str] = []
                for entry in entries:
                    if entry.is_file():
                        cancel.raise_if_cancelled()
                        directory_size += self._entry_size(entry, opts.mode)
                    elif opts.recursive and entry.is_dir(follow_symlinks=False):
                        subdirectories.append(entry.path)

            except PermissionError as exc:
                skipped += 1
                self._logger.warning(
                    "Access denied to directory %s, %s.",
                    current_dir,
                    outcome,
                    extra={"path": current_dir, "error": str(exc)},
                )
                if not opts.continue_on_error:
                    raise
                continue

            except OSError as exc:
                skipped += 1
                self._logger.error(
                    "An error occurred while scanning directory %s, %s.",
                    current_dir,
                    outcome,
                    exc_info=True,
                    extra={"path": current_dir, "error": str(exc)},
                )
                if not opts.continue_on_error:
                    raise
                continue

            total_size += directory_size
            scanned += 1

            if opts.progress is not None:
                opts.progress(total_size)

            directories_to_scan.extend(subdirectories)

        log_with_context(
            self._logger,
            logging.DEBUG,
            f"Size scan of {root} complete: {format_size(total_size)}",
            extra={
                "path": root,
                "total_bytes": total_size,
                "scanned_directories": scanned,
                "skipped_directories": skipped,
            },
        )

        return total_size

    def _entry_size(self, entry: os.DirEntry[str], mode: SizeMode) -> int:
        """Get the size of a single file entry.

        Args:
            entry: Directory entry of a file
            mode: Size calculation mode

        Returns:
            File size in bytes
        """
        stat = entry.stat()
        if mode == SizeMode.APPARENT:
            return stat.st_size
        blocks = getattr(stat, "st_blocks", None)
        if blocks is None:
            # No block accounting on this platform
            return stat.st_size
        return blocks * _STAT_BLOCK_SIZE
