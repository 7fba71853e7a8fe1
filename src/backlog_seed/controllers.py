"""Controllers for task provisioning CLI commands."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from backlog_seed.catalogs import CATALOGS, get_catalog
from backlog_seed.config import Settings
from backlog_seed.provisioning import provision_tasks
from backlog_seed.runner import CommandRunner, DryRunCommandRunner, SubprocessCommandRunner

logger = logging.getLogger(__name__)

RunnerFactory = Callable[[Settings, Callable[[str], None]], CommandRunner]


@dataclass(slots=True)
class SeedCommand:
    """CLI input for one catalog provisioning run."""

    catalog: str
    dry_run: bool | None = None


@dataclass(slots=True)
class SeedResult:
    """Outcome of a completed provisioning run."""

    catalog: str
    project: str
    created: int
    dry_run: bool


def default_runner_factory(settings: Settings, emit: Callable[[str], None]) -> CommandRunner:
    if settings.dry_run:
        return DryRunCommandRunner(emit=emit)
    return SubprocessCommandRunner(executable=settings.executable, cwd=settings.workdir)


class SeedCliController:
    """Coordinates catalog selection, runner setup, and provisioning."""

    def __init__(self, runner_factory: RunnerFactory | None = None) -> None:
        self._runner_factory = runner_factory or default_runner_factory

    def run(self, command: SeedCommand, *, emit: Callable[[str], None]) -> SeedResult:
        """Provision one catalog; ``TaskCreationError`` and ``ValueError`` propagate."""

        settings = Settings.from_env()
        if command.dry_run is not None:
            settings.dry_run = command.dry_run
        settings.validate()
        catalog = get_catalog(command.catalog)
        runner = self._runner_factory(settings, emit)

        logger.info(
            "Provisioning catalog %s (%d tasks, dry_run=%s)",
            catalog.name,
            len(catalog),
            settings.dry_run,
        )
        emit(f"Starting task creation for the {catalog.project} project...")
        success_line = (
            "Command printed (dry run)." if settings.dry_run else "Task created successfully."
        )
        created = provision_tasks(
            catalog.tasks,
            runner=runner,
            emit=emit,
            success_line=success_line,
        )
        if settings.dry_run:
            emit(
                f"Dry run finished. {created} task commands for the {catalog.project} "
                "project were printed, nothing was created.",
            )
        else:
            emit(
                f"Finished. All {created} tasks for the {catalog.project} project "
                "have been created in backlog.",
            )
        return SeedResult(
            catalog=catalog.name,
            project=catalog.project,
            created=created,
            dry_run=settings.dry_run,
        )

    def list_catalogs(self) -> list[str]:
        lines = ["Task catalogs:"]
        for name in sorted(CATALOGS):
            catalog = CATALOGS[name]
            lines.append(f"- {name}: {catalog.project} ({len(catalog)} tasks)")
        return lines
