# src/main.py - v2
"""CLI entry point: cache a shell command's stdout for a TTL.

Usage:
    fclicache [-t TTL] [-c] [--cache-root DIR] [-v] COMMAND

Example:
    fclicache -t 600 'curl -s https://example.com/slow.json'
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from fclicache.cache.file_store import FileCacheStore
from fclicache.cache.fingerprint import compute_fingerprint
from fclicache.cache.models import ExecutionResult
from fclicache.config.settings import Settings, load_settings
from fclicache.core.exceptions import FclicacheError
from fclicache.core.executor import execute
from fclicache.logging.context import clear_context, set_invocation_context
from fclicache.logging.logger import setup_logging
from fclicache.version import __version__

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Run one invocation and return the process exit status.

    The wrapped command's own exit status is not propagated.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_settings()
    except ValidationError as exc:
        setup_logging(level="DEBUG" if args.verbose else "WARNING")
        logger.error("Invalid configuration: %s", exc)
        return 1

    try:
        _setup_logging(settings, args.verbose)
    except OSError as exc:
        setup_logging(level="DEBUG" if args.verbose else "WARNING")
        logger.error("Fatal error: unable to open log file: %s", exc)
        return 1

    try:
        result = _run(args, settings)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130
    except FclicacheError as exc:
        logger.error("Fatal error: %s", exc, exc_info=args.verbose)
        return 1
    finally:
        clear_context()

    sys.stdout.write(result.output)
    sys.stdout.flush()
    return 0


def run() -> None:
    """Console-script entry point."""
    sys.exit(main())


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fclicache",
        description="Cache the output of a command for a given TTL.",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-t", "--ttl", type=_non_negative_int, default=None,
        help="Cache lifetime in seconds (default: 3600, or FCLICACHE_DEFAULT_TTL)",
    )
    parser.add_argument(
        "-c", "--clean", dest="force_renew", action="store_true",
        help="Clean the cache and re-execute the command. The result is cached again.",
    )
    parser.add_argument(
        "--cache-root", type=Path, default=None,
        help="Cache directory (default: <tmp>/fclicache/caches)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "command",
        help="Command to cache. Quote it if it contains spaces, e.g. 'sleep 10 && date'",
    )
    return parser


def _run(args: argparse.Namespace, settings: Settings) -> ExecutionResult:
    """Resolve cache location and execute with caching."""
    ttl = settings.default_ttl if args.ttl is None else args.ttl
    cache_root = args.cache_root or settings.cache_root

    store = FileCacheStore(cache_root)
    cache_file = store.entry_path(args.command)
    set_invocation_context(compute_fingerprint(args.command), str(cache_file))

    result = execute(
        args.command,
        ttl,
        cache_file,
        force_renew=args.force_renew,
        shell=settings.shell,
    )
    logger.info(
        "%s (ttl %ds)", "Served from cache" if result.from_cache else "Executed", ttl,
    )
    return result


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {number}")
    return number


def _setup_logging(settings: Settings, verbose: bool) -> None:
    setup_logging(
        level="DEBUG" if verbose else settings.log_level,
        log_format=settings.log_format,
        log_file=settings.log_file,
        rotation=settings.log_rotation,
        retention=settings.log_retention,
    )


if __name__ == "__main__":
    sys.exit(main())
