"""Runtime configuration for task provisioning."""

from __future__ import annotations

import logging
import os
import shlex
from dataclasses import dataclass
from pathlib import Path

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass(slots=True)
class Settings:
    """Settings for the external backlog tool and console output."""

    executable: str = "backlog"
    workdir: Path | None = None
    dry_run: bool = False
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> Settings:
        """Load settings from environment with defaults for local use."""

        workdir_raw = os.getenv("BACKLOG_SEED_WORKDIR", "").strip()
        return cls(
            executable=os.getenv("BACKLOG_SEED_EXECUTABLE", "backlog").strip(),
            workdir=Path(workdir_raw).expanduser() if workdir_raw else None,
            dry_run=_env_bool("BACKLOG_SEED_DRY_RUN", default=False),
            log_level=os.getenv("BACKLOG_SEED_LOG_LEVEL", "WARNING").strip().upper(),
        )

    def validate(self) -> None:
        """Raise configuration error if a setting cannot be used."""

        try:
            executable_argv = shlex.split(self.executable)
        except ValueError as error:
            raise ValueError(
                f"Invalid BACKLOG_SEED_EXECUTABLE: {self.executable!r} ({error})",
            ) from error
        if not executable_argv:
            raise ValueError("BACKLOG_SEED_EXECUTABLE must not be empty.")
        if self.workdir is not None and not self.workdir.is_dir():
            raise ValueError(
                f"BACKLOG_SEED_WORKDIR is not a directory: {str(self.workdir)!r}",
            )
        self.validate_log_level()

    def validate_log_level(self) -> None:
        if self.log_level not in _LOG_LEVELS:
            raise ValueError(
                f"Invalid BACKLOG_SEED_LOG_LEVEL: {self.log_level!r}. "
                f"Expected one of: {', '.join(_LOG_LEVELS)}.",
            )

    @property
    def logging_level(self) -> int:
        return logging.getLevelName(self.log_level)


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "on"}:
        return True
    if normalized in {"0", "false", "no", "off"}:
        return False
    raise ValueError(f"Invalid boolean value for {name}: {value!r}")
