"""Shared fixtures."""

from collections.abc import Generator
from pathlib import Path

import pytest
from aioresponses import aioresponses as aioresponses_cls


@pytest.fixture
def aioresponses() -> Generator[aioresponses_cls, None, None]:
    """Mock all aiohttp requests made during the test."""
    with aioresponses_cls() as mocked:
        yield mocked


@pytest.fixture
def result_root(tmp_path: Path) -> Path:
    """Create an empty result directory."""
    root = tmp_path / "test-result"
    root.mkdir()
    return root
