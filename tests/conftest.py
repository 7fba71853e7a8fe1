"""Shared test fixtures."""

from __future__ import annotations

import json
import os
import stat
import sys
from dataclasses import dataclass
from pathlib import Path

import pytest

from backlog_seed.runner import TaskCreationError

_FAKE_BACKLOG_SCRIPT = """
import json
import os
import sys
from pathlib import Path

args = sys.argv[1:]
with Path(os.environ["FAKE_BACKLOG_LOG"]).open("a", encoding="utf-8") as handle:
    handle.write(json.dumps(args) + "\\n")

fail_title = os.environ.get("FAKE_BACKLOG_FAIL_TITLE")
if fail_title and fail_title in args:
    print("backlog: refusing to create task", file=sys.stderr)
    raise SystemExit(3)
print("Created task")
"""


@dataclass(slots=True)
class FakeBacklog:
    """Fake ``backlog`` executable that logs its argv as JSON lines."""

    bin_dir: Path
    log_path: Path

    def calls(self) -> list[list[str]]:
        if not self.log_path.exists():
            return []
        return [json.loads(line) for line in self.log_path.read_text("utf-8").splitlines()]


class RecordingRunner:
    """In-memory runner that optionally fails on the N-th invocation (1-indexed)."""

    def __init__(self, fail_at: int | None = None) -> None:
        self.commands: list[str] = []
        self._fail_at = fail_at

    def run(self, command: str) -> None:
        self.commands.append(command)
        if self._fail_at is not None and len(self.commands) == self._fail_at:
            raise TaskCreationError(
                f"Command failed with exit code 1: invocation {self._fail_at}",
                command=command,
            )


@pytest.fixture()
def recording_runner():
    """Factory for in-memory runners."""

    return RecordingRunner


@pytest.fixture()
def fake_backlog(tmp_path: Path, monkeypatch) -> FakeBacklog:
    """Put a fake ``backlog`` executable first on PATH."""

    if os.name == "nt":
        pytest.skip("fake backlog launcher is POSIX-only")

    bin_dir = tmp_path / "bin"
    bin_dir.mkdir(parents=True, exist_ok=True)
    implementation = bin_dir / "backlog_impl.py"
    implementation.write_text(_FAKE_BACKLOG_SCRIPT.strip() + "\n", "utf-8")

    launcher = bin_dir / "backlog"
    launcher.write_text(
        f'#!/usr/bin/env sh\nexec "{sys.executable}" "{implementation}" "$@"\n',
        "utf-8",
    )
    launcher.chmod(launcher.stat().st_mode | stat.S_IXUSR)

    log_path = tmp_path / "backlog_calls.jsonl"
    monkeypatch.setenv("FAKE_BACKLOG_LOG", str(log_path))
    monkeypatch.delenv("FAKE_BACKLOG_FAIL_TITLE", raising=False)
    monkeypatch.setenv("PATH", f"{bin_dir}{os.pathsep}{os.environ.get('PATH', '')}")
    return FakeBacklog(bin_dir=bin_dir, log_path=log_path)


@pytest.fixture(autouse=True)
def _clean_seed_env(monkeypatch) -> None:
    for name in (
        "BACKLOG_SEED_EXECUTABLE",
        "BACKLOG_SEED_WORKDIR",
        "BACKLOG_SEED_DRY_RUN",
        "BACKLOG_SEED_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
