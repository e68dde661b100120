"""Shared pytest fixtures for railroad-dsl tests."""

from pathlib import Path

import pytest


@pytest.fixture
def examples_dir() -> Path:
    """Return path to the bundled example diagrams."""
    return Path(__file__).parent.parent / "examples"


@pytest.fixture
def select_source() -> str:
    """A representative single-diagram document."""
    return '["SELECT", <"*", \'column\'*",">, "FROM", \'table\'?#`clause`]'


@pytest.fixture
def diagram_file(tmp_path: Path, select_source: str) -> Path:
    """Write the representative document to a temporary file."""
    path = tmp_path / "select.txt"
    path.write_text(select_source)
    return path
