# src/core/executor.py - v2
"""Cache-aware command execution.

Decides per invocation whether to serve the cached stdout of a command or to
run it again and refresh the cache:

1. No regular file at ``cache_file``: execute.
2. Entry younger than ``ttl`` and no force renew: return its content.
3. Otherwise delete the entry, execute, persist the new output.

Stale entries are removed before re-execution so that a failed write never
leaves old content behind looking fresh.
"""

from __future__ import annotations

import logging
from pathlib import Path

from fclicache.cache.file_store import clean_cache, read_cache, write_cache
from fclicache.cache.freshness import is_fresh, stat_entry
from fclicache.cache.models import ExecutionResult
from fclicache.core.process import DEFAULT_SHELL, decode_output, run_shell

logger = logging.getLogger(__name__)


def execute(
    command: str,
    ttl: int,
    cache_file: Path,
    force_renew: bool = False,
    shell: str = DEFAULT_SHELL,
) -> ExecutionResult:
    """Serve ``command``'s output from ``cache_file`` or run it and cache it.

    Args:
        command: Shell command line, passed verbatim to the shell.
        ttl: Maximum entry age in seconds; 0 means always stale.
        cache_file: Cache file for this command.
        force_renew: Re-execute even if the entry is fresh. The new output
            is still cached.
        shell: Shell used to run the command.

    Returns:
        ExecutionResult with the output text and whether it came from cache.

    Raises:
        FclicacheError: Any metadata, read, delete, spawn or write failure.
    """
    if ttl < 0:
        raise ValueError(f"ttl must be >= 0, got {ttl}")

    cache_file = Path(cache_file)
    if cache_file.is_file():
        entry = stat_entry(cache_file)
        if is_fresh(entry, ttl, force_renew):
            logger.debug(
                "Cache hit for %s (age %ds < ttl %ds)",
                cache_file, entry.age_seconds, ttl,
            )
            return ExecutionResult(
                output=decode_output(read_cache(cache_file)),
                from_cache=True,
                cache_file=cache_file,
                age_seconds=entry.age_seconds,
            )
        logger.debug(
            "Cache stale for %s (age %ds, ttl %ds, force=%s)",
            cache_file, entry.age_seconds, ttl, force_renew,
        )
        clean_cache(cache_file)
    else:
        logger.debug("Cache miss for %s", cache_file)

    stdout = run_shell(command, shell=shell)
    write_cache(cache_file, stdout)
    return ExecutionResult(
        output=decode_output(stdout),
        from_cache=False,
        cache_file=cache_file,
    )


def cache_aware_execute_command(
    command: str,
    ttl: int,
    cache_file: Path,
    force_renew: bool = False,
) -> str:
    """Return ``command``'s stdout, from cache when fresh."""
    return execute(command, ttl, cache_file, force_renew=force_renew).output
