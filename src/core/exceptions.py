# src/core/exceptions.py - v1
"""Error taxonomy for cache-aware execution.

Every failure is fatal to the invocation: there is no retry and no partial
success. Each error wraps the underlying OSError as its ``__cause__``.
"""

from __future__ import annotations

from pathlib import Path


class FclicacheError(Exception):
    """Base class for all fatal invocation errors."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path

    def __str__(self) -> str:
        base = super().__str__()
        if self.path is None:
            return base
        return f"{base}: {self.path}"


class CacheMetadataError(FclicacheError):
    """Cache file metadata or its age could not be determined."""


class CacheReadError(FclicacheError):
    """A fresh cache file could not be read."""


class CacheDeleteError(FclicacheError):
    """A stale cache file could not be removed."""


class CacheWriteError(FclicacheError):
    """Captured output could not be persisted."""


class CacheRootError(FclicacheError):
    """The cache root directory could not be created."""


class ProcessSpawnError(FclicacheError):
    """The shell could not be launched."""
