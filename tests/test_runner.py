from __future__ import annotations

import shlex
from pathlib import Path

import allure
import pytest

from backlog_seed.command import build_command
from backlog_seed.models import TaskDescriptor, task_create
from backlog_seed.runner import DryRunCommandRunner, SubprocessCommandRunner, TaskCreationError

pytestmark = [
    allure.epic("Task Provisioning"),
    allure.feature("Command Runner"),
]


def test_subprocess_runner_passes_each_field_as_one_argument(fake_backlog) -> None:
    plan = 'Step "one"\nStep $two `three`\n| a | b |'
    command = build_command(
        TaskDescriptor(
            command=task_create("Quoted 'title'", priority="high", labels=("a", "b")),
            plan=plan,
            acceptance_criteria="x.,y.",
        ),
        preamble="RULE",
    )

    SubprocessCommandRunner().run(command)

    assert fake_backlog.calls() == [
        [
            "task",
            "create",
            "Quoted 'title'",
            "--priority",
            "high",
            "--labels",
            "a,b",
            "--plan",
            f"RULE\n\n{plan}",
            "--ac",
            "x.,y.",
        ],
    ]


def test_subprocess_runner_raises_on_non_zero_exit(fake_backlog, monkeypatch) -> None:
    monkeypatch.setenv("FAKE_BACKLOG_FAIL_TITLE", "Broken")
    command = task_create("Broken", priority="high", labels=("a",))

    with pytest.raises(TaskCreationError, match="exit code 3") as excinfo:
        SubprocessCommandRunner().run(command)

    assert excinfo.value.command == command
    assert len(fake_backlog.calls()) == 1


def test_subprocess_runner_raises_when_executable_is_missing(tmp_path: Path) -> None:
    runner = SubprocessCommandRunner(executable=str(tmp_path / "no-such-backlog"))

    with pytest.raises(TaskCreationError, match="Failed to start"):
        runner.run("backlog task create Title")


def test_subprocess_runner_replaces_executable_and_uses_workdir(
    fake_backlog,
    tmp_path: Path,
) -> None:
    workdir = tmp_path / "project"
    workdir.mkdir()
    launcher = fake_backlog.bin_dir / "backlog"
    runner = SubprocessCommandRunner(executable=shlex.quote(str(launcher)), cwd=workdir)

    runner.run("backlog.md task create Title")

    assert fake_backlog.calls() == [["task", "create", "Title"]]


def test_subprocess_runner_rejects_unparseable_command() -> None:
    with pytest.raises(TaskCreationError, match="Cannot parse command line"):
        SubprocessCommandRunner().run("backlog task create 'unterminated")


def test_subprocess_runner_rejects_empty_command() -> None:
    with pytest.raises(TaskCreationError, match="empty"):
        SubprocessCommandRunner().run("   ")


def test_dry_run_runner_records_and_emits() -> None:
    emitted: list[str] = []
    runner = DryRunCommandRunner(emit=emitted.append)

    runner.run("backlog task create A")
    runner.run("backlog task create B")

    assert runner.commands == ["backlog task create A", "backlog task create B"]
    assert emitted == runner.commands
