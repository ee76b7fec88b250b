# src/cache/freshness.py - v2
"""Cache freshness decision.

The age of an entry is taken from the cache file's own metadata: its birth
time where the platform reports one, otherwise its modification time. Entries
are deleted before being rewritten, so on platforms without a birth time the
modification time still marks when the current entry was created.
"""

from __future__ import annotations

import logging
import os
import time
from datetime import datetime, timezone
from pathlib import Path

from fclicache.cache.models import CacheEntryStat
from fclicache.core.exceptions import CacheMetadataError

logger = logging.getLogger(__name__)


def created_timestamp(st: os.stat_result) -> float:
    """Creation time of a file as a POSIX timestamp."""
    birthtime = getattr(st, "st_birthtime", None)
    if birthtime:
        return float(birthtime)
    return st.st_mtime


def elapsed_seconds(created: float, now: float) -> int:
    """Whole seconds between ``created`` and ``now``, truncated.

    Raises:
        CacheMetadataError: If ``created`` lies in the future.
    """
    delta = now - created
    if delta < 0:
        raise CacheMetadataError(
            f"Unable to calculate elapsed time (created {-delta:.3f}s in the future)"
        )
    return int(delta)


def stat_entry(path: Path, now: float | None = None) -> CacheEntryStat:
    """Read the age and size of an existing cache file.

    Args:
        path: Cache file.
        now: Reference time (defaults to the current time).

    Raises:
        CacheMetadataError: If the metadata cannot be read or the age
            cannot be computed.
    """
    try:
        st = path.stat()
    except OSError as exc:
        raise CacheMetadataError("Unable to read metadata of cache file", path) from exc

    created = created_timestamp(st)
    if now is None:
        now = time.time()
    try:
        age = elapsed_seconds(created, now)
    except CacheMetadataError as exc:
        exc.path = path
        raise

    return CacheEntryStat(
        path=path,
        created_at=datetime.fromtimestamp(created, tz=timezone.utc),
        age_seconds=age,
        size_bytes=st.st_size,
    )


def is_fresh(entry: CacheEntryStat, ttl: int, force_renew: bool = False) -> bool:
    """Serve-from-cache verdict: younger than TTL and not forced."""
    if force_renew:
        logger.debug("Force renew requested for %s", entry.path)
        return False
    return entry.is_fresh(ttl)
