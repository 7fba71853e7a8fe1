"""Task descriptor and catalog models."""

from __future__ import annotations

import shlex
from collections.abc import Sequence
from dataclasses import dataclass

BACKLOG_EXECUTABLE = "backlog"


@dataclass(frozen=True, slots=True)
class TaskDescriptor:
    """One task-creation request for the external backlog tool.

    ``plan`` and ``acceptance_criteria`` are opaque payloads. They are quoted
    as single arguments when the final command is assembled.
    """

    command: str
    plan: str | None = None
    acceptance_criteria: str | None = None


@dataclass(frozen=True, slots=True)
class TaskCatalog:
    """Ordered, named list of task descriptors for one project."""

    name: str
    project: str
    tasks: tuple[TaskDescriptor, ...]

    def __len__(self) -> int:
        return len(self.tasks)


def task_create(
    title: str,
    *,
    priority: str,
    labels: Sequence[str],
    depends_on: Sequence[str] = (),
    description: str | None = None,
) -> str:
    """Render a ``backlog task create`` command with every value quoted."""

    argv = [
        BACKLOG_EXECUTABLE,
        "task",
        "create",
        title,
        "--priority",
        priority,
        "--labels",
        ",".join(labels),
    ]
    if depends_on:
        argv.extend(["--depends-on", ",".join(depends_on)])
    if description:
        argv.extend(["--desc", description])
    return shlex.join(argv)
