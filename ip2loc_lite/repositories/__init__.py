"""Storage engine selection for imported databases."""

import logging
from typing import Iterable

from ip2loc_lite import DEFAULT_DATABASES, DEFAULT_STORAGE_ENGINE
from ip2loc_lite.catalog import ensure_supported_database
from ip2loc_lite.exceptions import (
    UnsupportedDatabaseError,
    UnsupportedStorageEngineError,
)
from ip2loc_lite.repositories import mysql
from ip2loc_lite.repositories._base import IP2LocRepository, StorageEngine
from ip2loc_lite.utils.database_names import database_to_repository_name

logger = logging.getLogger(__name__)

REPOSITORIES: dict[StorageEngine, dict[str, type[IP2LocRepository]]] = {
    StorageEngine.MYSQL: dict(mysql.repositories),
}


def get_storage_engine(name: str) -> StorageEngine:
    try:
        return StorageEngine(name.strip().lower())
    except ValueError:
        raise UnsupportedStorageEngineError(
            name,
            "Only the following storage engines are supported: "
            + ", ".join(engine.value for engine in StorageEngine)
            + f" (got {name!r})",
        ) from None


def resolve_repository(
    database: str,
    *,
    storage_engine: str = DEFAULT_STORAGE_ENGINE,
    supported_databases: Iterable[str] = DEFAULT_DATABASES,
) -> IP2LocRepository:
    """Return the repository handle that stores ``database``.

    The storage engine is checked before anything about the database.
    """

    engine = get_storage_engine(storage_engine)
    ensure_supported_database(database, supported_databases)

    repository_name = database_to_repository_name(database)
    if (repository_cls := REPOSITORIES[engine].get(repository_name)) is None:
        raise UnsupportedDatabaseError(
            database,
            f"No {engine.value} repository for database {database!r}",
        )

    logger.debug(f"Resolved {database} to {repository_cls.__name__} ({engine.value})")
    return repository_cls(database=database)


__all__ = [
    "IP2LocRepository",
    "REPOSITORIES",
    "StorageEngine",
    "get_storage_engine",
    "resolve_repository",
]
