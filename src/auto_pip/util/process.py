""" Run external commands to completion. """

from __future__ import annotations

import logging
import shlex
import subprocess as sp
import typing as t
from pathlib import Path

logger = logging.getLogger(__name__)


def exec_command(command: str, args: t.Sequence[str], cwd: Path | None = None) -> str:
    """Runs *command* with *args* and waits for it to finish. Returns the decoded standard output with surrounding
    whitespace removed.

    Raises:
      subprocess.CalledProcessError: If the command exits with a non-zero status code. The error carries the
        captured stdout and stderr.
      FileNotFoundError: If the *command* cannot be found.
    """

    argv = [command, *args]
    logger.debug("Running command %s", shlex.join(argv))
    result = sp.run(argv, cwd=cwd, stdout=sp.PIPE, stderr=sp.PIPE, check=True)
    stdout = result.stdout.decode().strip()
    if stdout:
        logger.debug("%s", stdout)
    return stdout
