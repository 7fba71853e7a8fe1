"""CLI entrypoints for backlog-seed."""

import logging

import rich_click as click

from backlog_seed import __version__
from backlog_seed.catalogs import CATALOGS
from backlog_seed.config import Settings
from backlog_seed.controllers import SeedCliController, SeedCommand
from backlog_seed.runner import TaskCreationError

click.rich_click.USE_MARKDOWN = True
SEED_CONTROLLER = SeedCliController()


@click.group()
@click.version_option(version=__version__, prog_name="backlog-seed")
def backlog_seed() -> None:
    """Create Backlog.md task catalogs through the backlog CLI."""

    _configure_logging()


@backlog_seed.command("list")
def list_catalogs() -> None:
    """Show built-in task catalogs."""

    _emit_lines(SEED_CONTROLLER.list_catalogs())


@backlog_seed.command("run")
@click.argument("catalog", type=click.Choice(sorted(CATALOGS), case_sensitive=False))
@click.option(
    "--dry-run/--no-dry-run",
    default=None,
    help="Print task commands instead of executing them. Overrides BACKLOG_SEED_DRY_RUN.",
)
def run_catalog(catalog: str, dry_run: bool | None) -> None:
    """Create every task of one catalog, stopping at the first failure."""

    _run(SeedCommand(catalog=catalog.lower(), dry_run=dry_run))


@click.command()
@click.version_option(version=__version__, prog_name="create-spring-boot-tasks")
def create_spring_boot_tasks() -> None:
    """Create the Spring Boot product catalog tasks."""

    _configure_logging()
    _run(SeedCommand(catalog="spring-boot"))


@click.command()
@click.version_option(version=__version__, prog_name="create-helidon-tasks")
def create_helidon_tasks() -> None:
    """Create the Helidon product catalog tasks."""

    _configure_logging()
    _run(SeedCommand(catalog="helidon"))


def _run(command: SeedCommand) -> None:
    try:
        SEED_CONTROLLER.run(command, emit=click.echo)
    except TaskCreationError as error:
        click.echo("Task creation failed.", err=True)
        raise click.ClickException(str(error)) from error
    except ValueError as error:
        raise click.ClickException(str(error)) from error


def _configure_logging() -> None:
    try:
        settings = Settings.from_env()
        settings.validate_log_level()
    except ValueError as error:
        raise click.ClickException(str(error)) from error
    logging.basicConfig(
        level=settings.logging_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _emit_lines(lines: list[str]) -> None:
    for line in lines:
        click.echo(line)


if __name__ == "__main__":  # pragma: no cover
    backlog_seed()
