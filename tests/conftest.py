"""Shared fixtures for sheetscan tests."""

import os
from pathlib import Path

import pytest


@pytest.fixture
def make_file():
    """Create a file with given content size and modification time."""

    def _make(path: Path, size: int = 10, mtime: float | None = None) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(b"x" * size)
        if mtime is not None:
            os.utime(path, (mtime, mtime))
        return path

    return _make
