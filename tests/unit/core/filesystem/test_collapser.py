"""Tests for collapsing a single wrapper directory."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from dirutil.core.exceptions import (
    DestinationExistsError,
    DirectoryNotFoundError,
    StructuralViolationError,
    SubdirectoryCountError,
    UnexpectedFilesError,
)
from dirutil.core.filesystem.collapser import collapse_single_subdirectory
from tests.fixtures.filesystem_trees import TreeLayout, build_tree, snapshot_tree


class TestCollapseSingleSubdirectory:
    """Test suite for collapse_single_subdirectory()."""

    def test_moves_inner_contents_up(self, make_tree: Callable[[TreeLayout], Path]) -> None:
        """Test inner files and directories become top-level entries."""
        root = make_tree({"inner": {"x.txt": "x", "subA": {"y.txt": "y"}}})

        collapse_single_subdirectory(root)

        assert sorted(path.name for path in root.iterdir()) == ["subA", "x.txt"]
        assert (root / "x.txt").read_text() == "x"
        assert (root / "subA" / "y.txt").read_text() == "y"
        assert not (root / "inner").exists()

    def test_empty_inner_directory(self, make_tree: Callable[[TreeLayout], Path]) -> None:
        """Test an empty wrapper leaves an empty directory."""
        root = make_tree({"inner": {}})

        collapse_single_subdirectory(root)

        assert list(root.iterdir()) == []

    def test_files_at_top_level_rejected(self, make_tree: Callable[[TreeLayout], Path]) -> None:
        """Test a file next to the wrapper fails before anything moves."""
        root = make_tree({"stray.txt": "s", "inner": {"x.txt": "x"}})
        before = snapshot_tree(root)

        with pytest.raises(UnexpectedFilesError, match="contains 1 file") as exc_info:
            collapse_single_subdirectory(root)

        assert exc_info.value.file_count == 1
        assert snapshot_tree(root) == before

    def test_no_subdirectory_rejected(self, tmp_path: Path) -> None:
        """Test an empty directory has no wrapper to collapse."""
        with pytest.raises(SubdirectoryCountError) as exc_info:
            collapse_single_subdirectory(tmp_path)

        assert exc_info.value.found == 0

    def test_two_subdirectories_rejected(self, make_tree: Callable[[TreeLayout], Path]) -> None:
        """Test more than one subdirectory fails unchanged."""
        root = make_tree({"one": {"a": "a"}, "two": {"b": "b"}})
        before = snapshot_tree(root)

        with pytest.raises(SubdirectoryCountError, match="found 2") as exc_info:
            collapse_single_subdirectory(root)

        assert exc_info.value.found == 2
        assert snapshot_tree(root) == before

    def test_files_checked_before_subdirectories(self, make_tree: Callable[[TreeLayout], Path]) -> None:
        """Test the file check wins when both preconditions fail."""
        root = make_tree({"stray.txt": "s", "one": {}, "two": {}})

        with pytest.raises(UnexpectedFilesError):
            collapse_single_subdirectory(root)

    def test_missing_directory(self, tmp_path: Path) -> None:
        """Test a missing directory raises DirectoryNotFoundError."""
        with pytest.raises(DirectoryNotFoundError, match="does not exist"):
            collapse_single_subdirectory(tmp_path / "missing")

    def test_name_collision_with_wrapper(self, make_tree: Callable[[TreeLayout], Path]) -> None:
        """Test an inner child named like the wrapper is a destination conflict."""
        root = make_tree({"pkg": {"pkg": {"x.txt": "x"}}})

        with pytest.raises(DestinationExistsError) as exc_info:
            collapse_single_subdirectory(root)

        assert exc_info.value.kind == "directory"
        assert exc_info.value.path == str(root / "pkg")
        assert isinstance(exc_info.value, FileExistsError)

    def test_structural_errors_share_base(self) -> None:
        """Test every precondition failure is a StructuralViolationError."""
        for error_type in (UnexpectedFilesError, SubdirectoryCountError, DestinationExistsError):
            assert issubclass(error_type, StructuralViolationError)

    def test_conflict_keeps_completed_moves(self, make_tree: Callable[[TreeLayout], Path]) -> None:
        """Test entries moved before a conflict stay moved."""
        root = make_tree({"pkg": {"sub": {"y.txt": "y"}, "pkg": "inner file"}})

        with pytest.raises(DestinationExistsError) as exc_info:
            collapse_single_subdirectory(root)

        assert exc_info.value.kind == "file"
        assert exc_info.value.path == str(root / "pkg")
        assert (root / "sub" / "y.txt").read_text() == "y"
        assert not (root / "pkg" / "sub").exists()
        assert (root / "pkg" / "pkg").read_text() == "inner file"

    def test_symlinked_wrapper_rejected(self, tmp_path: Path) -> None:
        """Test a link to a directory is not collapsed and its target is untouched."""
        target = build_tree(tmp_path / "target", {"x.txt": "x", "subA": {"y.txt": "y"}})
        root = tmp_path / "root"
        root.mkdir()
        (root / "link").symlink_to(target, target_is_directory=True)
        before = snapshot_tree(target)

        with pytest.raises(SubdirectoryCountError) as exc_info:
            collapse_single_subdirectory(root)

        assert exc_info.value.found == 0
        assert snapshot_tree(target) == before
        assert (root / "link").is_symlink()
