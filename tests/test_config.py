from __future__ import annotations

import logging
from pathlib import Path

import allure
import pytest

from backlog_seed.config import Settings

pytestmark = [
    allure.epic("Task Provisioning"),
    allure.feature("Configuration"),
]


def test_from_env_defaults() -> None:
    settings = Settings.from_env()

    assert settings.executable == "backlog"
    assert settings.workdir is None
    assert settings.dry_run is False
    assert settings.log_level == "WARNING"
    assert settings.logging_level == logging.WARNING
    settings.validate()


def test_from_env_reads_overrides(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("BACKLOG_SEED_EXECUTABLE", "npx backlog.md")
    monkeypatch.setenv("BACKLOG_SEED_WORKDIR", str(tmp_path))
    monkeypatch.setenv("BACKLOG_SEED_DRY_RUN", "yes")
    monkeypatch.setenv("BACKLOG_SEED_LOG_LEVEL", "debug")

    settings = Settings.from_env()

    assert settings.executable == "npx backlog.md"
    assert settings.workdir == tmp_path
    assert settings.dry_run is True
    assert settings.logging_level == logging.DEBUG
    settings.validate()


def test_from_env_rejects_invalid_boolean(monkeypatch) -> None:
    monkeypatch.setenv("BACKLOG_SEED_DRY_RUN", "maybe")

    with pytest.raises(ValueError, match="Invalid boolean value for BACKLOG_SEED_DRY_RUN"):
        Settings.from_env()


def test_validate_rejects_empty_executable() -> None:
    with pytest.raises(ValueError, match="must not be empty"):
        Settings(executable="  ").validate()


def test_validate_rejects_unbalanced_executable_quotes() -> None:
    with pytest.raises(ValueError, match="Invalid BACKLOG_SEED_EXECUTABLE"):
        Settings(executable="'backlog").validate()


def test_validate_rejects_missing_workdir(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match="BACKLOG_SEED_WORKDIR is not a directory"):
        Settings(workdir=tmp_path / "missing").validate()


def test_validate_rejects_unknown_log_level() -> None:
    with pytest.raises(ValueError, match="Invalid BACKLOG_SEED_LOG_LEVEL"):
        Settings(log_level="CHATTY").validate()
