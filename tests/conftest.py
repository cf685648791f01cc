"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import logging
from collections.abc import Callable, Generator
from pathlib import Path

import pytest

from dirutil.utils.logging import clear_correlation_id
from tests.fixtures.filesystem_trees import TreeLayout, build_tree


@pytest.fixture
def make_tree(tmp_path: Path) -> Callable[[TreeLayout], Path]:
    """Build a tree under ``tmp_path / "tree"``."""

    def _make(layout: TreeLayout) -> Path:
        return build_tree(tmp_path / "tree", layout)

    return _make


@pytest.fixture(autouse=True)
def reset_correlation_id() -> Generator[None, None, None]:
    """Ensure no correlation ID leaks between tests."""
    clear_correlation_id()
    yield
    clear_correlation_id()


@pytest.fixture
def debug_logger() -> Generator[logging.Logger, None, None]:
    """Logger at DEBUG level that propagates to caplog."""
    log = logging.getLogger("dirutil.tests")
    previous = log.level
    log.setLevel(logging.DEBUG)
    yield log
    log.setLevel(previous)
