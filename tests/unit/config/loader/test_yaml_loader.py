"""Tests for YAML configuration loader."""

from __future__ import annotations

from pathlib import Path

import pytest

from dirutil.config.exceptions import ConfigLoadError
from dirutil.config.loader.yaml_loader import YamlLoader


class TestYamlLoader:
    """Test suite for YamlLoader class."""

    def test_load_mapping(self, tmp_path: Path) -> None:
        """Test a mapping document is returned as a dict."""
        config_file = tmp_path / "dirutil.yaml"
        _ = config_file.write_text(
            "size:\n"
            "  recursive: false\n"
            "copy:\n"
            "  buffer_size: 16384\n"
        )

        assert YamlLoader().load(config_file) == {
            "size": {"recursive": False},
            "copy": {"buffer_size": 16384},
        }

    def test_empty_file(self, tmp_path: Path) -> None:
        """Test an empty file yields an empty dict."""
        config_file = tmp_path / "empty.yaml"
        _ = config_file.write_text("")

        assert YamlLoader().load(config_file) == {}

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test a missing file raises ConfigLoadError."""
        missing = tmp_path / "missing.yaml"

        with pytest.raises(ConfigLoadError) as exc_info:
            _ = YamlLoader().load(missing)

        assert exc_info.value.file_path == str(missing)
        assert isinstance(exc_info.value.__cause__, OSError)

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        """Test malformed YAML raises ConfigLoadError."""
        config_file = tmp_path / "bad.yaml"
        _ = config_file.write_text("size: [unclosed\n")

        with pytest.raises(ConfigLoadError, match="Failed to load"):
            _ = YamlLoader().load(config_file)

    def test_non_mapping_top_level(self, tmp_path: Path) -> None:
        """Test a list document is rejected."""
        config_file = tmp_path / "list.yaml"
        _ = config_file.write_text("- one\n- two\n")

        with pytest.raises(ConfigLoadError, match="top level must be a mapping"):
            _ = YamlLoader().load(config_file)

    def test_unsafe_tags_rejected(self, tmp_path: Path) -> None:
        """Test Python object tags are not constructed."""
        config_file = tmp_path / "unsafe.yaml"
        _ = config_file.write_text("value: !!python/object/apply:os.getcwd []\n")

        with pytest.raises(ConfigLoadError):
            _ = YamlLoader().load(config_file)
