# src/logging/context.py - v2
"""Per-invocation logging context: command fingerprint and cache file."""

from __future__ import annotations

import contextvars
from dataclasses import dataclass
from typing import Any

_fingerprint: contextvars.ContextVar[int | None] = contextvars.ContextVar(
    "fingerprint", default=None
)
_cache_file: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "cache_file", default=None
)


@dataclass
class LogContext:
    """Snapshot of the current logging context."""

    fingerprint: int | None = None
    cache_file: str | None = None

    def as_dict(self) -> dict[str, Any]:
        """Return non-None fields as dict for JSON log injection."""
        return {k: v for k, v in self.__dict__.items() if v is not None}


def get_context() -> LogContext:
    return LogContext(
        fingerprint=_fingerprint.get(),
        cache_file=_cache_file.get(),
    )


def set_invocation_context(fingerprint: int, cache_file: str) -> None:
    """Set context once per CLI invocation."""
    _fingerprint.set(fingerprint)
    _cache_file.set(cache_file)


def clear_context() -> None:
    _fingerprint.set(None)
    _cache_file.set(None)
