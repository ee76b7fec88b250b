# tests/unit/logging/test_unit_context.py - v1
"""Tests for logging/context.py."""

from __future__ import annotations

from fclicache.logging.context import clear_context, get_context, set_invocation_context


class TestLogContext:
    def test_empty_by_default(self):
        ctx = get_context()
        assert ctx.fingerprint is None
        assert ctx.as_dict() == {}

    def test_set_and_get(self):
        set_invocation_context(42, "/tmp/fclicache/caches/42")
        ctx = get_context()
        assert ctx.fingerprint == 42
        assert ctx.as_dict() == {"fingerprint": 42, "cache_file": "/tmp/fclicache/caches/42"}

    def test_clear(self):
        set_invocation_context(1, "x")
        clear_context()
        assert get_context().as_dict() == {}
