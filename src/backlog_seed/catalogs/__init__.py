"""Built-in task catalogs."""

from backlog_seed.catalogs.helidon import HELIDON
from backlog_seed.catalogs.spring_boot import SPRING_BOOT
from backlog_seed.models import TaskCatalog

CATALOGS: dict[str, TaskCatalog] = {
    catalog.name: catalog for catalog in (SPRING_BOOT, HELIDON)
}


def get_catalog(name: str) -> TaskCatalog:
    """Return the catalog registered under ``name``."""

    try:
        return CATALOGS[name]
    except KeyError as error:
        raise ValueError(
            f"Unknown task catalog: {name!r}. Expected one of: {', '.join(sorted(CATALOGS))}.",
        ) from error


__all__ = ["CATALOGS", "HELIDON", "SPRING_BOOT", "get_catalog"]
