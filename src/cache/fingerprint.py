# src/cache/fingerprint.py - v3
"""Command fingerprinting: command text -> 64-bit cache key.

The builtin ``hash()`` is salted per interpreter, so the key is taken from a
BLAKE2b digest instead. That keeps the cache file name identical across
separate invocations of the tool. Not collision resistant by contract.
"""

from __future__ import annotations

import hashlib
from pathlib import Path

FINGERPRINT_BYTES = 8


def compute_fingerprint(command: str) -> int:
    """Return the unsigned 64-bit fingerprint of a command string."""
    digest = hashlib.blake2b(
        command.encode("utf-8", errors="surrogatepass"),
        digest_size=FINGERPRINT_BYTES,
    ).digest()
    return int.from_bytes(digest, "big")


def cache_path_for(cache_root: Path | str, command: str) -> Path:
    """Cache file for ``command`` under ``cache_root`` (decimal file name)."""
    return Path(cache_root) / str(compute_fingerprint(command))
