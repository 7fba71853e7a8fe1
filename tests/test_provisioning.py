from __future__ import annotations

import shlex

import allure
import pytest

from backlog_seed.models import TaskDescriptor, task_create
from backlog_seed.policy import GOLDEN_RULE
from backlog_seed.provisioning import provision_tasks
from backlog_seed.runner import TaskCreationError

pytestmark = [
    allure.epic("Task Provisioning"),
    allure.feature("Sequential Fail-Fast Driver"),
]


def _descriptors(count: int) -> list[TaskDescriptor]:
    return [
        TaskDescriptor(
            command=task_create(f"Task {index}", priority="high", labels=("x",)),
            plan=f"Plan {index}",
            acceptance_criteria=f"Criterion {index}.",
        )
        for index in range(1, count + 1)
    ]


def _option(tokens: list[str], flag: str) -> str:
    return tokens[tokens.index(flag) + 1]


def test_all_descriptors_succeed_in_list_order(recording_runner) -> None:
    runner = recording_runner()
    lines: list[str] = []

    created = provision_tasks(_descriptors(4), runner=runner, emit=lines.append)

    assert created == 4
    titles = [shlex.split(command)[3] for command in runner.commands]
    assert titles == ["Task 1", "Task 2", "Task 3", "Task 4"]
    assert lines.count("Task created successfully.") == 4
    assert lines[0] == "Executing: backlog task create 'Task 1'..."


@pytest.mark.parametrize("fail_at", [1, 2, 5])
def test_first_failure_stops_remaining_descriptors(recording_runner, fail_at: int) -> None:
    runner = recording_runner(fail_at=fail_at)
    lines: list[str] = []

    with pytest.raises(TaskCreationError) as excinfo:
        provision_tasks(_descriptors(5), runner=runner, emit=lines.append)

    assert len(runner.commands) == fail_at
    assert excinfo.value.command == runner.commands[-1]
    assert shlex.split(excinfo.value.command)[3] == f"Task {fail_at}"
    assert lines.count("Task created successfully.") == fail_at - 1


def test_empty_descriptor_list_makes_no_invocations(recording_runner) -> None:
    runner = recording_runner()
    lines: list[str] = []

    assert provision_tasks([], runner=runner, emit=lines.append) == 0
    assert runner.commands == []
    assert lines == []


def test_plan_with_quote_and_newline_reaches_runner_as_single_token(recording_runner) -> None:
    tricky_plan = 'Implementation Plan:\n1. Run \'git commit -m "chore: init"\'.\n2. Done.'
    descriptors = [
        TaskDescriptor(command=task_create("First", priority="high", labels=("a",)), plan="one"),
        TaskDescriptor(
            command=task_create("Second", priority="high", labels=("a",)),
            plan=tricky_plan,
            acceptance_criteria='Has "quotes",and commas.',
        ),
        TaskDescriptor(command=task_create("Third", priority="low", labels=("a",))),
    ]
    runner = recording_runner()

    provision_tasks(descriptors, runner=runner, emit=lambda _line: None)

    assert len(runner.commands) == 3
    tokens = shlex.split(runner.commands[1])
    assert tokens.count("--plan") == 1
    assert _option(tokens, "--plan") == f"{GOLDEN_RULE}\n\n{tricky_plan}"
    assert _option(tokens, "--ac") == 'Has "quotes",and commas.'
    assert "--plan" not in shlex.split(runner.commands[2])


def test_custom_preamble_is_used(recording_runner) -> None:
    runner = recording_runner()

    provision_tasks(_descriptors(1), runner=runner, preamble="RULE", emit=lambda _line: None)

    assert _option(shlex.split(runner.commands[0]), "--plan") == "RULE\n\nPlan 1"
