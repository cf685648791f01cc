"""Recursive directory copy."""

from __future__ import annotations

import logging
import os
import shutil

from dirutil.core.cancellation import CancellationToken, ensure_token
from dirutil.core.exceptions import DirectoryNotFoundError
from dirutil.types.aliases import PathInput
from dirutil.types.models import CopyStats

logger = logging.getLogger(__name__)

DEFAULT_BUFFER_SIZE = 81920


class TreeCopier:
    """Copies a directory tree file by file.

    File contents are streamed byte for byte; metadata such as permissions
    and timestamps is not copied. Nothing is rolled back when a copy fails or
    is cancelled, and the file being written at that moment may be left
    partially written.
    """

    def __init__(self, buffer_size: int = DEFAULT_BUFFER_SIZE, log: logging.Logger | None = None) -> None:
        """Initialize the copier.

        Args:
            buffer_size: Chunk size used when streaming file contents
            log: Logger receiving copy events
        """
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self.buffer_size: int = buffer_size
        self._logger: logging.Logger = log if log is not None else logger

    def copy(
        self,
        source_dir: PathInput,
        dest_dir: PathInput,
        overwrite: bool = True,
        token: CancellationToken | None = None,
    ) -> CopyStats:
        """Copy ``source_dir`` recursively into ``dest_dir``.

        Args:
            source_dir: Directory to copy
            dest_dir: Destination directory, created if missing
            overwrite: Replace existing destination files; when False they
                are skipped and left untouched
            token: Cancellation token checked before each file and subdirectory

        Returns:
            Summary of the copy

        Raises:
            DirectoryNotFoundError: If ``source_dir`` does not exist
            OperationCancelledError: If ``token`` is cancelled
        """
        source = os.fspath(source_dir)
        if not os.path.isdir(source):
            raise DirectoryNotFoundError(f"Source directory not found: {source}", source)

        stats = self._copy_tree(source, os.fspath(dest_dir), overwrite, ensure_token(token))

        self._logger.debug(
            "Copied %s to %s",
            source,
            os.fspath(dest_dir),
            extra={
                "source": source,
                "destination": os.fspath(dest_dir),
                "files_copied": stats.files_copied,
                "files_skipped": stats.files_skipped,
                "bytes_copied": stats.bytes_copied,
            },
        )
        return stats

    def _copy_tree(self, source: str, destination: str, overwrite: bool, token: CancellationToken) -> CopyStats:
        stats = CopyStats()

        if not os.path.isdir(destination):
            os.makedirs(destination, exist_ok=True)
            stats.directories_created += 1

        with os.scandir(source) as it:
            entries = list(it)

        files = [entry for entry in entries if entry.is_file()]
        subdirectories = [entry for entry in entries if entry.is_dir()]

        for entry in files:
            token.raise_if_cancelled()

            dest_file = os.path.join(destination, entry.name)
            if not overwrite and os.path.exists(dest_file):
                self._logger.debug("Skipping existing file: %s", dest_file, extra={"path": dest_file})
                stats.files_skipped += 1
                continue

            stats.bytes_copied += self._copy_file(entry.path, dest_file, overwrite)
            stats.files_copied += 1

        for entry in subdirectories:
            token.raise_if_cancelled()

            dest_subdir = os.path.join(destination, entry.name)
            stats.merge(self._copy_tree(entry.path, dest_subdir, overwrite, token))

        return stats

    def _copy_file(self, source_file: str, dest_file: str, overwrite: bool) -> int:
        """Stream one file's bytes, returning the number written."""
        mode = "wb" if overwrite else "xb"
        with open(source_file, "rb") as src, open(dest_file, mode) as dst:
            shutil.copyfileobj(src, dst, self.buffer_size)
            return dst.tell()
