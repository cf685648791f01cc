"""Log the contents of a directory tree, one line per entry."""

from __future__ import annotations

import functools
import logging
import os

from dirutil.types.aliases import PathInput

logger = logging.getLogger(__name__)


@functools.cache
def indent_for(level: int) -> str:
    """Return the indentation string for a tree depth (two spaces per level)."""
    return " " * (level * 2)


def log_contents_recursively(
    path: PathInput,
    indent_level: int = 0,
    log: logging.Logger | None = None,
) -> None:
    """Log ``path`` and everything below it at INFO level.

    Unreadable directories are reported (WARNING for access denied, ERROR
    otherwise) and the rest of the tree is still logged.

    Args:
        path: Directory to log
        indent_level: Depth of ``path`` in the logged tree
        log: Logger receiving the tree lines
    """
    active_logger = log if log is not None else logger
    directory = os.fspath(path)

    if not os.path.isdir(directory):
        active_logger.warning("Directory does not exist: %s", directory, extra={"path": directory})
        return

    try:
        indent = indent_for(indent_level)

        active_logger.info("%s📁 %s", indent, os.path.basename(directory))

        with os.scandir(directory) as it:
            entries = list(it)

        for entry in entries:
            if entry.is_file():
                active_logger.info("%s  📄 %s", indent, entry.name)

        for entry in entries:
            if entry.is_dir():
                log_contents_recursively(entry.path, indent_level + 1, active_logger)

    except PermissionError:
        active_logger.warning("Access denied to %s", directory, exc_info=True, extra={"path": directory})
    except OSError:
        active_logger.error("Error reading directory %s", directory, exc_info=True, extra={"path": directory})
