"""Assemble final backlog command lines from task descriptors."""

from __future__ import annotations

import shlex

from backlog_seed.models import TaskDescriptor
from backlog_seed.policy import GOLDEN_RULE

PLAN_FLAG = "--plan"
ACCEPTANCE_CRITERIA_FLAG = "--ac"


def combine_plan(plan: str, *, preamble: str = GOLDEN_RULE) -> str:
    """Prefix the plan with the workflow preamble and a blank line."""

    return f"{preamble}\n\n{plan}"


def quote_argument(text: str) -> str:
    """Return ``text`` as exactly one POSIX shell token."""

    return shlex.quote(text)


def build_command(descriptor: TaskDescriptor, *, preamble: str = GOLDEN_RULE) -> str:
    """Append the quoted plan and acceptance criteria to the base command."""

    parts = [descriptor.command.strip()]
    if descriptor.plan:
        combined = combine_plan(descriptor.plan, preamble=preamble)
        parts.append(f"{PLAN_FLAG} {quote_argument(combined)}")
    if descriptor.acceptance_criteria:
        parts.append(
            f"{ACCEPTANCE_CRITERIA_FLAG} {quote_argument(descriptor.acceptance_criteria)}",
        )
    return " ".join(parts)


def command_head(command: str) -> str:
    """Return the part of a command before its first long flag."""

    head, _, _ = command.partition(" --")
    return head.strip()
