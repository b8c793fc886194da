"""Allow-list of IP2Location LITE database editions."""

import logging
from typing import Iterable

from ip2loc_lite import DEFAULT_DATABASES
from ip2loc_lite.exceptions import UnsupportedDatabaseError

logger = logging.getLogger(__name__)


def is_supported_database(
    database: str, supported_databases: Iterable[str] = DEFAULT_DATABASES
) -> bool:
    return database in tuple(supported_databases)


def ensure_supported_database(
    database: str, supported_databases: Iterable[str] = DEFAULT_DATABASES
) -> str:
    """Return ``database`` unchanged or raise ``UnsupportedDatabaseError``."""

    if not is_supported_database(database, supported_databases):
        logger.debug(f"Database {database!r} is not in the supported list")
        raise UnsupportedDatabaseError(database)
    return database
