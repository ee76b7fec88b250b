# src/__init__.py - v1
"""fclicache: memoize the stdout of shell commands for a TTL."""

from fclicache.version import __version__

__all__ = ["__version__"]
