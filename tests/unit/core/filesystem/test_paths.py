"""Tests for path normalization."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from dirutil.core.filesystem.paths import normalize


class TestNormalize:
    """Test suite for normalize()."""

    def test_strips_trailing_separator(self, tmp_path: Path) -> None:
        """Test trailing separators are removed."""
        assert normalize(f"{tmp_path}{os.sep}") == str(tmp_path)
        assert normalize(f"{tmp_path}{os.sep}{os.sep}") == str(tmp_path)

    def test_relative_path_becomes_absolute(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test relative paths resolve against the working directory."""
        monkeypatch.chdir(tmp_path)

        assert normalize("child") == os.path.join(os.getcwd(), "child")

    def test_collapses_dot_segments(self, tmp_path: Path) -> None:
        """Test '.' and '..' segments are collapsed lexically."""
        raw = os.path.join(str(tmp_path), "a", ".", "b", "..", "c")

        assert normalize(raw) == os.path.join(str(tmp_path), "a", "c")

    def test_accepts_path_objects(self, tmp_path: Path) -> None:
        """Test os.PathLike input."""
        assert normalize(tmp_path / "x") == str(tmp_path / "x")

    @pytest.mark.skipif(os.name == "nt", reason="POSIX root")
    def test_root_keeps_separator(self) -> None:
        """Test the filesystem root is returned with its separator."""
        assert normalize("/") == "/"
        assert normalize("//") in ("/", "//")

    @pytest.mark.skipif(os.name == "nt", reason="POSIX file URI")
    def test_file_uri_is_converted(self) -> None:
        """Test file:// URIs become local paths."""
        assert normalize("file:///var/data/") == "/var/data"
        assert normalize("file:///var/my%20data") == "/var/my data"

    def test_empty_path_rejected(self) -> None:
        """Test empty input raises ValueError."""
        with pytest.raises(ValueError, match="must not be empty"):
            _ = normalize("")

    def test_idempotent(self, tmp_path: Path) -> None:
        """Test normalizing twice gives the same result."""
        once = normalize(f"{tmp_path}{os.sep}sub{os.sep}")

        assert normalize(once) == once
