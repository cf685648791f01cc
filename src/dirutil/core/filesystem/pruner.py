"""Empty-directory detection and removal."""

from __future__ import annotations

import logging
import os

from dirutil.core.cancellation import CancellationToken, ensure_token
from dirutil.core.filesystem.enumerator import iter_all_directories_recursive
from dirutil.types.aliases import PathInput
from dirutil.utils.formatting import format_count

logger = logging.getLogger(__name__)


def is_empty_directory(directory: PathInput) -> bool:
    """Check whether ``directory`` has no entries at all.

    Only a single entry is read, so large directories are not enumerated.
    """
    with os.scandir(directory) as entries:
        return next(entries, None) is None


def find_empty_directories(root: PathInput, token: CancellationToken | None = None) -> list[str]:
    """Return every descendant directory of ``root`` that has no entries.

    ``root`` itself is never reported, and neither are symbolic links to
    directories.

    Args:
        root: Directory whose descendants are examined
        token: Cancellation token checked before each probe

    Returns:
        Empty directories in depth-first enumeration order
    """
    cancel = ensure_token(token)
    empty: list[str] = []
    for directory in iter_all_directories_recursive(root):
        cancel.raise_if_cancelled()
        if os.path.islink(directory):
            continue
        if is_empty_directory(directory):
            empty.append(directory)
    return empty


def delete_empty_directories(
    root: PathInput,
    token: CancellationToken | None = None,
    log: logging.Logger | None = None,
) -> list[str]:
    """Delete the empty descendant directories of ``root`` in a single pass.

    The list of empty directories is computed once up front and removed in
    that order. A parent that only becomes empty because its children were
    removed here is left in place; call again to prune it.

    Args:
        root: Directory whose descendants are pruned
        token: Cancellation token checked before each removal
        log: Logger receiving removal events

    Returns:
        The directories that were removed

    Raises:
        OSError: If a directory cannot be removed (for example it gained an
            entry after it was found empty)
    """
    active_logger = log if log is not None else logger
    cancel = ensure_token(token)

    deleted: list[str] = []
    for directory in find_empty_directories(root, cancel):
        cancel.raise_if_cancelled()
        active_logger.debug("Deleting empty directory: %s", directory, extra={"path": directory})
        os.rmdir(directory)
        deleted.append(directory)

    if deleted:
        active_logger.info(
            "Pruned %s under %s",
            format_count(len(deleted), "empty directory"),
            os.fspath(root),
            extra={"path": os.fspath(root), "deleted": len(deleted)},
        )
    return deleted
