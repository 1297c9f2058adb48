"""Run shell commands and surface failures as restore errors."""

from __future__ import annotations

import shlex
import subprocess
from logging import Logger, getLogger

from ..domain.errors import ShellCommandError


_SECRET_KEYS = frozenset({"--password", "PGPASSWORD"})


class SubprocessShellProcessor:
    """Execute commands through the system shell."""

    def __init__(self, *, timeout: float | None = None, logger: Logger | None = None) -> None:
        self._timeout = timeout
        self._logger = logger or getLogger(__name__)

    def process(self, command: str) -> None:
        """Run ``command`` and raise ``ShellCommandError`` on a non-zero exit."""

        self._logger.debug("Running shell command: %s", _redact(command))
        completed = subprocess.run(
            command,
            shell=True,
            capture_output=True,
            text=True,
            timeout=self._timeout,
            check=False,
        )
        if completed.returncode != 0:
            raise ShellCommandError(_redact(command), completed.returncode, completed.stderr)


def _redact(command: str) -> str:
    """Hide inline credentials before a command reaches the logs."""

    tokens = shlex.split(command)
    for index, token in enumerate(tokens):
        key, sep, _ = token.partition("=")
        if sep and key in _SECRET_KEYS:
            tokens[index] = f"{key}=***"
    return shlex.join(tokens)


__all__ = ["SubprocessShellProcessor"]
