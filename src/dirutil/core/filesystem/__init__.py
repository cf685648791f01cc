"""Filesystem engine: enumeration, size scanning, pruning, copying and collapsing."""

from __future__ import annotations

from .collapser import collapse_single_subdirectory
from .copier import DEFAULT_BUFFER_SIZE, TreeCopier
from .enumerator import (
    directories_containing_file,
    directories_ordered_by_level,
    directory_exists,
    iter_all_directories_recursive,
    iter_immediate_directories,
    list_all_directories_recursive,
    list_files_by_extension,
    list_immediate_directories,
    list_immediate_files,
)
from .paths import normalize
from .pruner import delete_empty_directories, find_empty_directories, is_empty_directory
from .size_calculator import SizeCalculator
from .tree_logger import log_contents_recursively

__all__ = [
    "DEFAULT_BUFFER_SIZE",
    "SizeCalculator",
    "TreeCopier",
    "collapse_single_subdirectory",
    "delete_empty_directories",
    "directories_containing_file",
    "directories_ordered_by_level",
    "directory_exists",
    "find_empty_directories",
    "is_empty_directory",
    "iter_all_directories_recursive",
    "iter_immediate_directories",
    "list_all_directories_recursive",
    "list_files_by_extension",
    "list_immediate_directories",
    "list_immediate_files",
    "log_contents_recursively",
    "normalize",
]
