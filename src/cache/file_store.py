# src/cache/file_store.py - v1
"""File-backed cache store: one raw-bytes file per command fingerprint.

Stores captured stdout verbatim under CACHE_ROOT, file name = decimal
fingerprint. All I/O failures are raised as typed errors and never ignored.
"""

from __future__ import annotations

import logging
from pathlib import Path

from fclicache.cache.fingerprint import cache_path_for
from fclicache.core.exceptions import (
    CacheDeleteError,
    CacheReadError,
    CacheRootError,
    CacheWriteError,
)

logger = logging.getLogger(__name__)


def ensure_cache_root(cache_root: Path | str) -> Path:
    """Create the cache root directory (and parents) if missing.

    Raises:
        CacheRootError: If the directory cannot be created.
    """
    root = Path(cache_root).expanduser()
    try:
        root.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise CacheRootError("Unable to create cache root directory", root) from exc
    return root


def read_cache(cache_file: Path) -> bytes:
    """Return the full content of a cache file."""
    try:
        return cache_file.read_bytes()
    except OSError as exc:
        raise CacheReadError("Unable to read cache file", cache_file) from exc


def write_cache(cache_file: Path, data: bytes) -> None:
    """Write ``data`` verbatim, creating or truncating the file."""
    try:
        cache_file.write_bytes(data)
    except OSError as exc:
        raise CacheWriteError("Unable to write cache file", cache_file) from exc


def clean_cache(cache_file: Path) -> None:
    """Remove a cache file unconditionally.

    A missing file is not an error.

    Raises:
        CacheDeleteError: If an existing file cannot be removed.
    """
    try:
        cache_file.unlink(missing_ok=True)
    except OSError as exc:
        raise CacheDeleteError("Unable to remove cache file", cache_file) from exc
    logger.info("Removed cache file %s", cache_file)


class FileCacheStore:
    """Cache store rooted at an explicit directory."""

    def __init__(self, cache_root: Path | str) -> None:
        self._root = ensure_cache_root(cache_root)

    @property
    def root(self) -> Path:
        return self._root

    def entry_path(self, command: str) -> Path:
        """Return the cache file path for a command."""
        return cache_path_for(self._root, command)
