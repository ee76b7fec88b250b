# src/__main__.py - v1
"""Allow ``python -m fclicache``."""

from fclicache.main import run

run()
