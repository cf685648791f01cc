"""DirectoryUtil facade over the filesystem engine.

Synchronous operations call the engine directly. ``copy_directory`` and
``get_size_in_bytes`` are coroutines that hand the blocking work to an
execution context, so callers on an event loop can choose between running
inline and offloading to a worker thread.
"""

from __future__ import annotations

import logging
import os
import shutil
from collections.abc import Iterator
from typing import TYPE_CHECKING

from dirutil.core.cancellation import CancellationToken
from dirutil.core.execution import create_execution_context
from dirutil.core.filesystem import (
    DEFAULT_BUFFER_SIZE,
    SizeCalculator,
    TreeCopier,
    collapse_single_subdirectory,
    delete_empty_directories,
    directories_containing_file,
    directories_ordered_by_level,
    directory_exists,
    find_empty_directories,
    iter_all_directories_recursive,
    iter_immediate_directories,
    list_all_directories_recursive,
    list_files_by_extension,
    list_immediate_directories,
    log_contents_recursively,
    normalize,
)
from dirutil.core.temp_paths import TempPathUtil, new_temp_directory_path, working_directory
from dirutil.types.models import CopyRequest, CopyStats, SizeOptions, SizeRequest
from dirutil.utils.formatting import format_size
from dirutil.utils.logging import correlation_scope, log_with_context

if TYPE_CHECKING:
    from dirutil.config.models import DirUtilConfig
    from dirutil.types.aliases import PathInput
    from dirutil.types.protocols import ExecutionContext, PathUtil

logger = logging.getLogger(__name__)


class DirectoryUtil:
    """Directory operations bound to a logger and its collaborators."""

    def __init__(
        self,
        path_util: PathUtil | None = None,
        execution_context: ExecutionContext | None = None,
        size_options: SizeOptions | None = None,
        overwrite: bool = True,
        buffer_size: int = DEFAULT_BUFFER_SIZE,
        temp_prefix: str | None = None,
        log: logging.Logger | None = None,
    ) -> None:
        """Initialize the facade.

        Args:
            path_util: Collaborator minting temp directories
            execution_context: Collaborator running blocking work for the
                async operations (offloads to a thread by default)
            size_options: Defaults for ``get_size_in_bytes``
            overwrite: Default overwrite policy for ``copy_directory``
            buffer_size: Chunk size used when copying file contents
            temp_prefix: Default name prefix for ``create_temp_directory``
            log: Logger receiving operation events
        """
        self.log: logging.Logger = log if log is not None else logger
        self.path_util: PathUtil = path_util if path_util is not None else TempPathUtil()
        self.execution_context: ExecutionContext = (
            execution_context if execution_context is not None else create_execution_context()
        )
        self.size_options: SizeOptions = size_options if size_options is not None else SizeOptions()
        self.overwrite: bool = overwrite
        self.temp_prefix: str | None = temp_prefix

        self._size_calculator: SizeCalculator = SizeCalculator(log=self.log)
        self._copier: TreeCopier = TreeCopier(buffer_size=buffer_size, log=self.log)

    @classmethod
    def from_config(cls, config: DirUtilConfig, log: logging.Logger | None = None) -> DirectoryUtil:
        """Build a facade from a loaded configuration."""
        return cls(
            path_util=TempPathUtil(config.temp.root),
            execution_context=create_execution_context(config.execution.mode),
            size_options=config.size.to_options(),
            overwrite=config.copy_options.overwrite,
            buffer_size=config.copy_options.buffer_size,
            temp_prefix=config.temp.prefix,
            log=log,
        )

    # Enumeration

    def get_all_directories(self, directory: PathInput) -> list[str]:
        """Return the immediate subdirectories of ``directory``."""
        return list_immediate_directories(directory)

    def iter_all_directories(self, directory: PathInput) -> Iterator[str]:
        """Lazily yield the immediate subdirectories of ``directory``."""
        return iter_immediate_directories(directory)

    def get_all_directories_recursively(self, directory: PathInput) -> list[str]:
        """Return every descendant directory of ``directory``, pre-order."""
        return list_all_directories_recursive(directory)

    def iter_all_directories_recursively(self, directory: PathInput) -> Iterator[str]:
        """Lazily yield every descendant directory of ``directory``, pre-order."""
        return iter_all_directories_recursive(directory)

    @staticmethod
    def get_directories_ordered_by_levels(base_path: PathInput) -> list[str]:
        """Return all descendant directories, shallowest first."""
        return directories_ordered_by_level(base_path)

    def get_directories_containing_file(self, root: PathInput, file_name: str) -> list[str]:
        """Return the directories under ``root`` (inclusive) that directly hold ``file_name``."""
        return directories_containing_file(root, file_name)

    def get_files_by_extension(
        self,
        directory: PathInput,
        extension: str,
        recursive: bool = False,
    ) -> list[str]:
        """Return files in ``directory`` whose name ends in ``.<extension>``."""
        return list_files_by_extension(directory, extension, recursive=recursive)

    def exists(self, directory: PathInput) -> bool:
        """Whether ``directory`` exists and is a directory."""
        return directory_exists(directory)

    # Creation and deletion

    def delete(self, directory: PathInput) -> None:
        """Delete ``directory`` and everything below it.

        Raises:
            FileNotFoundError: If ``directory`` does not exist
        """
        path = os.fspath(directory)
        self.log.debug("Deleting directory %s", path, extra={"path": path})
        shutil.rmtree(path)

    def delete_if_exists(self, directory: PathInput) -> bool:
        """Delete ``directory`` if present.

        Returns:
            True if a directory was deleted
        """
        if not directory_exists(directory):
            return False
        self.delete(directory)
        return True

    def create_if_does_not_exist(self, directory: PathInput, log: bool = True) -> bool:
        """Create ``directory`` and any missing parents.

        Args:
            directory: Directory to create
            log: Emit a debug event when the directory is created

        Returns:
            True if the directory was created, False if it already existed
        """
        path = os.fspath(directory)
        if directory_exists(path):
            return False

        if log:
            self.log.debug("Creating directory %s", path, extra={"path": path})
        os.makedirs(path, exist_ok=True)
        return True

    def get_working_directory(self, log: bool = False) -> str:
        """Return the directory of the running program."""
        path = working_directory()
        if log:
            self.log.debug("Working directory: %s", path, extra={"path": path})
        return path

    @staticmethod
    def get_new_temp_directory_path() -> str:
        """Return a fresh temp directory path without creating it."""
        return new_temp_directory_path()

    def create_temp_directory(
        self,
        prefix: str | None = None,
        token: CancellationToken | None = None,
    ) -> str:
        """Create and return a unique temp directory through the path utility."""
        path = self.path_util.get_unique_temp_directory(
            prefix if prefix is not None else self.temp_prefix,
            True,
            token,
        )
        self.log.debug("Created temp directory %s", path, extra={"path": path})
        return path

    @staticmethod
    def normalize(path: PathInput) -> str:
        """Return ``path`` as an absolute path without trailing separators."""
        return normalize(path)

    # Pruning

    def get_empty_directories(
        self,
        root: PathInput,
        token: CancellationToken | None = None,
    ) -> list[str]:
        """Return the descendants of ``root`` that have no entries."""
        return find_empty_directories(root, token)

    def delete_empty_directories(
        self,
        root: PathInput,
        token: CancellationToken | None = None,
    ) -> list[str]:
        """Delete the empty descendants of ``root`` in a single pass."""
        return delete_empty_directories(root, token, log=self.log)

    # Structure

    def move_contents_up_one_level_strict(self, temp_dir: PathInput) -> None:
        """Replace ``temp_dir``'s single subdirectory with that subdirectory's contents."""
        collapse_single_subdirectory(temp_dir, log=self.log)

    def log_contents_recursively(self, path: PathInput, indent_level: int = 0) -> None:
        """Log the tree under ``path`` at INFO level."""
        log_contents_recursively(path, indent_level, log=self.log)

    # Async operations

    async def copy_directory(
        self,
        source_dir: PathInput,
        dest_dir: PathInput,
        overwrite: bool | None = None,
        token: CancellationToken | None = None,
    ) -> CopyStats:
        """Copy ``source_dir`` recursively into ``dest_dir``.

        Args:
            source_dir: Directory to copy
            dest_dir: Destination, created if missing
            overwrite: Replace existing destination files (defaults to the
                facade setting); when False existing files are skipped
            token: Cancellation token

        Returns:
            Summary of the copy

        Raises:
            DirectoryNotFoundError: If ``source_dir`` does not exist
            OperationCancelledError: If cancellation was requested
        """
        request = CopyRequest(
            source_dir=os.fspath(source_dir),
            dest_dir=os.fspath(dest_dir),
            overwrite=self.overwrite if overwrite is None else overwrite,
            token=(token or CancellationToken()).linked(),
        )

        with correlation_scope("copy"):
            stats = await self.execution_context.run_inline_or_offload(self._run_copy, request, request.token)
            log_with_context(
                self.log,
                logging.INFO,
                f"Copied {request.source_dir} to {request.dest_dir} ({format_size(stats.bytes_copied)})",
                extra={
                    "source": request.source_dir,
                    "destination": request.dest_dir,
                    "files_copied": stats.files_copied,
                    "files_skipped": stats.files_skipped,
                },
            )
            return stats

    async def get_size_in_bytes(
        self,
        directory: PathInput,
        options: SizeOptions | None = None,
        token: CancellationToken | None = None,
    ) -> int:
        """Return the total size of the files under ``directory``.

        Returns 0 for a missing directory without consulting the execution
        context.

        Raises:
            PermissionError: If a directory is unreadable and
                ``continue_on_error`` is disabled
            OperationCancelledError: If cancellation was requested
        """
        path = os.fspath(directory)
        if not directory_exists(path):
            return 0

        request = SizeRequest(
            directory=path,
            options=options if options is not None else self.size_options,
            token=(token or CancellationToken()).linked(),
        )

        with correlation_scope("size"):
            return await self.execution_context.run_inline_or_offload(self._run_size, request, request.token)

    def _run_copy(self, request: CopyRequest) -> CopyStats:
        return self._copier.copy(request.source_dir, request.dest_dir, request.overwrite, request.token)

    def _run_size(self, request: SizeRequest) -> int:
        return self._size_calculator.calculate(request.directory, request.options, request.token)
