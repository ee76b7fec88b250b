# tests/conftest.py - v2
"""Shared test fixtures: temp cache root and pre-seeded cache entries."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from fclicache.logging.context import clear_context


@pytest.fixture
def tmp_cache_dir(tmp_path: Path) -> Path:
    """Temporary cache root."""
    cache = tmp_path / "cache"
    cache.mkdir()
    return cache


@pytest.fixture
def cache_file(tmp_cache_dir: Path) -> Path:
    """Path of a cache entry that does not exist yet."""
    return tmp_cache_dir / "test_cache"


@pytest.fixture
def seed_cache(cache_file: Path) -> Callable[[bytes], Path]:
    """Write content to ``cache_file`` as if a previous run had cached it."""

    def _seed(content: bytes = b"not hello") -> Path:
        cache_file.write_bytes(content)
        return cache_file

    return _seed


@pytest.fixture(autouse=True)
def _reset_log_context():
    clear_context()
    yield
    clear_context()
