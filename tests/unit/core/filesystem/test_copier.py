"""Tests for recursive directory copying."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from dirutil.core.cancellation import CancellationToken
from dirutil.core.exceptions import DirectoryNotFoundError, OperationCancelledError
from dirutil.core.filesystem.copier import DEFAULT_BUFFER_SIZE, TreeCopier
from tests.fixtures.filesystem_trees import TreeLayout, build_tree, snapshot_tree

SOURCE_TREE: TreeLayout = {
    "file.txt": "source content",
    "binary.bin": bytes(range(256)) * 64,
    "nested": {
        "inner.txt": "inner",
        "deeper": {"leaf.txt": "leaf"},
        "empty": {},
    },
}


class TestTreeCopier:
    """Test suite for TreeCopier.copy()."""

    def test_default_buffer_size(self) -> None:
        """Test the default chunk size."""
        assert TreeCopier().buffer_size == DEFAULT_BUFFER_SIZE == 81920

    def test_invalid_buffer_size(self) -> None:
        """Test a non-positive chunk size is rejected."""
        with pytest.raises(ValueError):
            _ = TreeCopier(buffer_size=0)

    def test_copy_into_new_destination(self, tmp_path: Path) -> None:
        """Test the destination mirrors the source byte for byte."""
        source = build_tree(tmp_path / "src", SOURCE_TREE)
        dest = tmp_path / "dst"

        stats = TreeCopier().copy(source, dest)

        assert snapshot_tree(dest) == snapshot_tree(source)
        assert stats.files_copied == 4
        assert stats.files_skipped == 0
        # dst, nested, deeper, empty
        assert stats.directories_created == 4
        assert stats.bytes_copied == sum(len(v) for v in snapshot_tree(source).values() if v is not None)

    def test_small_buffer_copies_whole_file(self, tmp_path: Path) -> None:
        """Test files larger than the buffer are copied completely."""
        source = build_tree(tmp_path / "src", {"big.bin": b"0123456789" * 1000})
        dest = tmp_path / "dst"

        _ = TreeCopier(buffer_size=7).copy(source, dest)

        assert (dest / "big.bin").read_bytes() == b"0123456789" * 1000

    def test_overwrite_true_replaces_files(self, tmp_path: Path) -> None:
        """Test existing destination files are replaced."""
        source = build_tree(tmp_path / "src", SOURCE_TREE)
        dest = build_tree(tmp_path / "dst", {"file.txt": "a much longer stale destination content"})

        stats = TreeCopier().copy(source, dest, overwrite=True)

        assert (dest / "file.txt").read_text() == "source content"
        assert snapshot_tree(dest) == snapshot_tree(source)
        assert stats.directories_created == 3

    def test_overwrite_false_skips_existing(self, tmp_path: Path) -> None:
        """Test existing files are left unchanged without an error."""
        source = build_tree(tmp_path / "src", SOURCE_TREE)
        dest = build_tree(tmp_path / "dst", {"file.txt": "different", "nested": {"inner.txt": "kept"}})

        stats = TreeCopier().copy(source, dest, overwrite=False)

        assert (dest / "file.txt").read_text() == "different"
        assert (dest / "nested" / "inner.txt").read_text() == "kept"
        assert (dest / "nested" / "deeper" / "leaf.txt").read_text() == "leaf"
        assert stats.files_skipped == 2
        assert stats.files_copied == 2

    def test_extra_destination_files_untouched(self, tmp_path: Path) -> None:
        """Test files only present in the destination survive."""
        source = build_tree(tmp_path / "src", SOURCE_TREE)
        dest = build_tree(tmp_path / "dst", {"extra.txt": "mine"})

        _ = TreeCopier().copy(source, dest)

        assert (dest / "extra.txt").read_text() == "mine"

    def test_missing_source(self, tmp_path: Path) -> None:
        """Test a missing source raises before the destination is created."""
        dest = tmp_path / "dst"

        with pytest.raises(DirectoryNotFoundError, match="Source directory not found") as exc_info:
            _ = TreeCopier().copy(tmp_path / "missing", dest)

        assert isinstance(exc_info.value, FileNotFoundError)
        assert exc_info.value.path == str(tmp_path / "missing")
        assert not dest.exists()

    def test_cancelled_token(self, tmp_path: Path) -> None:
        """Test cancellation stops the copy before any file is written."""
        source = build_tree(tmp_path / "src", SOURCE_TREE)
        dest = tmp_path / "dst"
        token = CancellationToken()
        token.cancel()

        with pytest.raises(OperationCancelledError):
            _ = TreeCopier().copy(source, dest, token=token)

        assert [path for path in dest.iterdir() if path.is_file()] == []

    def test_cancelled_after_first_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test cancellation between files stops before later files and subdirectories."""
        source = build_tree(tmp_path / "src", {"a.txt": "a", "b.txt": "b", "nested": {"inner.txt": "i"}})
        dest = tmp_path / "dst"
        token = CancellationToken()
        copier = TreeCopier()
        real_copy_file = copier._copy_file  # pyright: ignore[reportPrivateUsage]
        copied: list[str] = []

        def copy_then_cancel(source_file: str, dest_file: str, overwrite: bool) -> int:
            written = real_copy_file(source_file, dest_file, overwrite)
            copied.append(dest_file)
            token.cancel()
            return written

        monkeypatch.setattr(copier, "_copy_file", copy_then_cancel)

        with pytest.raises(OperationCancelledError):
            _ = copier.copy(source, dest, token=token)

        assert len(copied) == 1
        assert [path.name for path in dest.iterdir()] == [Path(copied[0]).name]
        assert not (dest / "nested").exists()
