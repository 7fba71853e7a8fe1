"""Synchronous command runners for the external backlog CLI."""

from __future__ import annotations

import logging
import shlex
import subprocess
from collections.abc import Callable
from pathlib import Path
from typing import Protocol

from backlog_seed.command import command_head

logger = logging.getLogger(__name__)


class TaskCreationError(RuntimeError):
    """External task tool failed to start or exited with a non-zero status."""

    def __init__(self, message: str, *, command: str) -> None:
        super().__init__(message)
        self.command = command


class CommandRunner(Protocol):
    """Protocol implemented by command runners."""

    def run(self, command: str) -> None:
        """Execute one command line, raising ``TaskCreationError`` on failure."""


class SubprocessCommandRunner:
    """Run commands as child processes sharing the parent's console.

    The child's stdout and stderr are inherited so the operator sees the
    external tool's own output live. There is no timeout.
    """

    def __init__(self, *, executable: str | None = None, cwd: Path | None = None) -> None:
        self._executable = executable
        self._cwd = cwd

    def run(self, command: str) -> None:
        argv = self._build_argv(command)
        logger.debug("Running %s in %s", argv[0], self._cwd or Path.cwd())
        try:
            completed = subprocess.run(  # noqa: S603
                argv,
                check=False,
                cwd=self._cwd,
            )
        except OSError as error:
            raise TaskCreationError(
                f"Failed to start {argv[0]}: {error}",
                command=command,
            ) from error

        if completed.returncode != 0:
            raise TaskCreationError(
                f"Command failed with exit code {completed.returncode}: {command_head(command)}",
                command=command,
            )

    def _build_argv(self, command: str) -> list[str]:
        try:
            argv = shlex.split(command)
        except ValueError as error:
            raise TaskCreationError(
                f"Cannot parse command line: {error}",
                command=command,
            ) from error
        if not argv:
            raise TaskCreationError("Command line is empty.", command=command)
        if self._executable:
            argv = [*shlex.split(self._executable), *argv[1:]]
        return argv


class DryRunCommandRunner:
    """Record commands instead of executing them."""

    def __init__(self, emit: Callable[[str], None] | None = None) -> None:
        self.commands: list[str] = []
        self._emit = emit

    def run(self, command: str) -> None:
        self.commands.append(command)
        if self._emit is not None:
            self._emit(command)
