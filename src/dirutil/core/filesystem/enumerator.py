"""Read-only directory and file enumeration primitives.

All queries return plain path strings built by joining the queried directory
with each entry name, in filesystem enumeration order unless stated otherwise.
Errors from the operating system (missing directory, access denied) are not
suppressed.
"""

from __future__ import annotations

import fnmatch
import os
from collections.abc import Callable, Iterator

from dirutil.types.aliases import PathInput


def directory_exists(directory: PathInput) -> bool:
    """Check whether ``directory`` exists and is a directory."""
    return os.path.isdir(directory)


def _is_real_directory(entry: os.DirEntry[str]) -> bool:
    """Whether an entry is a directory that traversal may descend into."""
    return entry.is_dir(follow_symlinks=False)


def iter_immediate_directories(directory: PathInput) -> Iterator[str]:
    """Yield the immediate child directories of ``directory``.

    Symbolic links to directories are included.

    Raises:
        FileNotFoundError: If ``directory`` does not exist
        NotADirectoryError: If ``directory`` is not a directory
        PermissionError: If ``directory`` cannot be read
    """
    with os.scandir(directory) as entries:
        for entry in entries:
            if entry.is_dir():
                yield entry.path


def list_immediate_directories(directory: PathInput) -> list[str]:
    """Return the immediate child directories of ``directory``."""
    return list(iter_immediate_directories(directory))


def list_immediate_files(directory: PathInput) -> list[str]:
    """Return the direct file entries of ``directory``.

    Symbolic links to files are included.
    """
    with os.scandir(directory) as entries:
        return [entry.path for entry in entries if entry.is_file()]


def iter_all_directories_recursive(directory: PathInput) -> Iterator[str]:
    """Yield every descendant directory of ``directory`` depth-first.

    Traversal is pre-order and uses an explicit stack, so arbitrarily deep
    trees do not grow the call stack. Symbolic links to directories are
    yielded but not descended into. ``directory`` itself is not yielded.

    Raises:
        OSError: Any error enumerating ``directory`` or a descendant
    """
    # Each frame holds the children of one directory, reversed so pop() keeps
    # enumeration order
    stack: list[list[os.DirEntry[str]]] = []

    with os.scandir(directory) as entries:
        children = [entry for entry in entries if entry.is_dir()]
    children.reverse()
    stack.append(children)

    while stack:
        frame = stack[-1]
        if not frame:
            _ = stack.pop()
            continue

        entry = frame.pop()
        yield entry.path

        if _is_real_directory(entry):
            with os.scandir(entry.path) as entries:
                grandchildren = [child for child in entries if child.is_dir()]
            grandchildren.reverse()
            stack.append(grandchildren)


def list_all_directories_recursive(directory: PathInput) -> list[str]:
    """Return every descendant directory of ``directory`` depth-first."""
    return list(iter_all_directories_recursive(directory))


def directories_ordered_by_level(base_path: PathInput) -> list[str]:
    """Return all descendant directories ordered by depth, shallowest first.

    Directories at the same depth keep their depth-first enumeration order.
    """
    directories = list_all_directories_recursive(base_path)
    return sorted(directories, key=lambda path: len(path.split(os.sep)))


def _extension_matcher(extension: str) -> Callable[[str], bool]:
    ext = extension.lstrip(".")
    if not ext:
        # "*." semantics: names without any extension
        return lambda name: "." not in name
    pattern = f"*.{ext}"
    return lambda name: fnmatch.fnmatch(name, pattern)


def list_files_by_extension(
    directory: PathInput,
    extension: str,
    recursive: bool = False,
) -> list[str]:
    """Return files under ``directory`` matching ``*.<extension>``.

    A leading dot on ``extension`` is ignored, so ``"txt"`` and ``".txt"`` are
    equivalent. Case sensitivity follows the platform (``fnmatch``).

    Args:
        directory: Directory to search
        extension: Extension to match, with or without a leading dot
        recursive: Search all descendant directories instead of only the top one

    Returns:
        Matching file paths
    """
    matches = _extension_matcher(extension)

    roots = [os.fspath(directory)]
    if recursive:
        roots.extend(iter_all_directories_recursive(directory))

    found: list[str] = []
    for root in roots:
        with os.scandir(root) as entries:
            found.extend(entry.path for entry in entries if entry.is_file() and matches(entry.name))
    return found


def directories_containing_file(root: PathInput, file_name: str) -> list[str]:
    """Return every directory in the tree that directly contains ``file_name``.

    ``root`` itself is included when it matches. An empty ``file_name``
    returns an empty list without touching the filesystem.
    """
    if not file_name:
        return []

    candidates = [os.fspath(root)]
    candidates.extend(iter_all_directories_recursive(root))
    return [directory for directory in candidates if os.path.isfile(os.path.join(directory, file_name))]
