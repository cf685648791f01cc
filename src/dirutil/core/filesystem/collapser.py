"""Collapse a single-wrapper directory layout by one level.

Archives are often extracted as ``<temp>/<wrapper>/<contents>``. Collapsing
moves ``<contents>`` up into ``<temp>`` and removes the wrapper, after checking
that ``<temp>`` holds nothing but that one wrapper.
"""

from __future__ import annotations

import logging
import os
import shutil

from dirutil.core.exceptions import (
    DestinationExistsError,
    DirectoryNotFoundError,
    SubdirectoryCountError,
    UnexpectedFilesError,
)
from dirutil.core.filesystem.enumerator import list_immediate_directories, list_immediate_files
from dirutil.types.aliases import PathInput

logger = logging.getLogger(__name__)


def collapse_single_subdirectory(temp_dir: PathInput, log: logging.Logger | None = None) -> None:
    """Move the contents of the only subdirectory of ``temp_dir`` into ``temp_dir``.

    Preconditions are checked before anything is modified. Once moving has
    started a conflict stops the operation immediately, and entries already
    moved stay where they are.

    Args:
        temp_dir: Directory containing exactly one subdirectory and no files
        log: Logger receiving move events

    Raises:
        DirectoryNotFoundError: If ``temp_dir`` does not exist
        UnexpectedFilesError: If ``temp_dir`` directly contains files
        SubdirectoryCountError: If ``temp_dir`` does not hold exactly one
            subdirectory (a symbolic link to a directory does not count)
        DestinationExistsError: If a child of the inner directory collides
            with an existing entry of ``temp_dir``
    """
    active_logger = log if log is not None else logger
    root = os.fspath(temp_dir)

    if not os.path.isdir(root):
        raise DirectoryNotFoundError(f"The directory '{root}' does not exist.", root)

    root_files = list_immediate_files(root)
    if root_files:
        raise UnexpectedFilesError(root, len(root_files))

    root_dirs = list_immediate_directories(root)
    if len(root_dirs) != 1:
        raise SubdirectoryCountError(root, len(root_dirs))

    inner_dir = root_dirs[0]
    if os.path.islink(inner_dir):
        raise SubdirectoryCountError(root, 0)

    active_logger.info(
        "Moving contents from inner directory '%s' up to '%s'",
        inner_dir,
        root,
        extra={"inner": inner_dir, "path": root},
    )

    for directory in list_immediate_directories(inner_dir):
        dest_dir = os.path.join(root, os.path.basename(directory))
        if os.path.lexists(dest_dir):
            raise DestinationExistsError("directory", dest_dir)

        _ = shutil.move(directory, dest_dir)
        active_logger.debug("Moved directory: %s -> %s", directory, dest_dir)

    for file in list_immediate_files(inner_dir):
        dest_file = os.path.join(root, os.path.basename(file))
        if os.path.lexists(dest_file):
            raise DestinationExistsError("file", dest_file)

        _ = shutil.move(file, dest_file)
        active_logger.debug("Moved file: %s -> %s", file, dest_file)

    shutil.rmtree(inner_dir)
    active_logger.info("Inner directory '%s' deleted after move", inner_dir, extra={"inner": inner_dir})
