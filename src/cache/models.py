# src/cache/models.py - v2
"""Cache domain models: CacheEntryStat, ExecutionResult."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from pydantic import BaseModel, Field


class CacheEntryStat(BaseModel):
    """Age and size of one cache file at the time it was inspected."""

    path: Path
    created_at: datetime
    age_seconds: int = Field(ge=0)
    size_bytes: int = Field(ge=0)

    def is_fresh(self, ttl: int) -> bool:
        """True when the entry is younger than ``ttl`` seconds."""
        return self.age_seconds < ttl


class ExecutionResult(BaseModel):
    """Outcome of one cache-aware invocation."""

    output: str
    from_cache: bool
    cache_file: Path
    age_seconds: int | None = None
