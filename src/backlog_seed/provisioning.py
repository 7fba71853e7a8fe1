"""Sequential, fail-fast provisioning of task descriptors."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from backlog_seed.command import build_command, command_head
from backlog_seed.models import TaskDescriptor
from backlog_seed.policy import GOLDEN_RULE
from backlog_seed.runner import CommandRunner, TaskCreationError

logger = logging.getLogger(__name__)


def provision_tasks(
    tasks: Iterable[TaskDescriptor],
    *,
    runner: CommandRunner,
    preamble: str = GOLDEN_RULE,
    emit: Callable[[str], None] = print,
    success_line: str = "Task created successfully.",
) -> int:
    """Create every task in order and return how many were created.

    The first ``TaskCreationError`` propagates unchanged; later descriptors
    are never dispatched.
    """

    created = 0
    for index, descriptor in enumerate(tasks, start=1):
        command = build_command(descriptor, preamble=preamble)
        head = command_head(command)
        emit(f"Executing: {head}...")
        logger.info("Dispatching task %d: %s", index, head)
        try:
            runner.run(command)
        except TaskCreationError:
            logger.error("Task %d failed: %s", index, head)
            raise
        created += 1
        emit(success_line)
    logger.info("Provisioned %d task(s)", created)
    return created
