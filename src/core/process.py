# src/core/process.py - v1
"""Shell process runner.

The command text goes to the shell as one command line, so metacharacters are
interpreted by the shell. Only stdout is captured; stderr is inherited by the
caller. The child's exit status is logged but does not affect the result.
"""

from __future__ import annotations

import logging
import subprocess

from fclicache.core.exceptions import ProcessSpawnError

logger = logging.getLogger(__name__)

DEFAULT_SHELL = "sh"


def run_shell(command: str, shell: str = DEFAULT_SHELL) -> bytes:
    """Run ``command`` through ``shell -c`` and return its stdout bytes.

    Blocks until the child exits. No timeout.

    Raises:
        ProcessSpawnError: If the shell cannot be launched.
    """
    try:
        completed = subprocess.run(
            [shell, "-c", command],
            stdout=subprocess.PIPE,
            check=False,
        )
    except OSError as exc:
        raise ProcessSpawnError(f"Failed to execute process with shell {shell!r}") from exc

    if completed.returncode != 0:
        logger.debug("Command exited with status %d", completed.returncode)
    return completed.stdout


def decode_output(data: bytes) -> str:
    """Decode captured output as UTF-8, replacing invalid sequences."""
    return data.decode("utf-8", errors="replace")
