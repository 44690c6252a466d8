"""Shared fixtures for viewfinder tests."""

from pathlib import Path

import pytest

from viewfinder.resolver import file_exists


class CountingExists:
    """Existence check that records every candidate it is asked about."""

    def __init__(self):
        self.calls: list[Path] = []

    def __call__(self, path: Path) -> bool:
        self.calls.append(path)
        return file_exists(path)


@pytest.fixture
def counting_exists() -> CountingExists:
    return CountingExists()


@pytest.fixture
def make_view(tmp_path: Path):
    """Create a view file under tmp_path and return its resolved path."""

    def _make(relpath: str, content: str = "") -> Path:
        path = tmp_path / relpath
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content or relpath)
        return path.resolve()

    return _make
