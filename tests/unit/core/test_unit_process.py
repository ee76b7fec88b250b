# tests/unit/core/test_unit_process.py - v1
"""Tests for core/process.py (runs /bin/sh)."""

from __future__ import annotations

import pytest

from fclicache.core.exceptions import ProcessSpawnError
from fclicache.core.process import decode_output, run_shell


class TestRunShell:
    def test_captures_stdout(self):
        assert run_shell("echo 'hello'") == b"hello\n"

    def test_shell_metacharacters(self):
        assert run_shell("echo a && echo b | tr b c") == b"a\nc\n"

    def test_stderr_not_captured(self, capfd):
        assert run_shell("echo oops 1>&2") == b""
        assert "oops" in capfd.readouterr().err

    def test_nonzero_exit_is_not_an_error(self):
        assert run_shell("echo partial; exit 3") == b"partial\n"

    def test_no_output(self):
        assert run_shell("true") == b""

    def test_missing_shell(self):
        with pytest.raises(ProcessSpawnError, match="no-such-shell"):
            run_shell("echo hi", shell="/nonexistent/no-such-shell")


class TestDecodeOutput:
    def test_utf8(self):
        assert decode_output("héllo".encode()) == "héllo"

    def test_invalid_bytes_replaced(self):
        assert decode_output(b"a\xffb") == "a�b"
