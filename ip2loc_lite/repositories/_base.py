from enum import Enum
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

from ip2loc_lite.utils.database_names import database_to_csv_name


class StorageEngine(str, Enum):
    MYSQL = "mysql"


class IP2LocRepository(BaseModel):
    """Handle describing where one database edition is stored.

    Loading rows is done by the import step; the handle only names the
    target table and the CSV layout it expects.
    """

    model_config: ConfigDict = ConfigDict(frozen=True)

    engine: ClassVar[StorageEngine]
    table_name: ClassVar[str]
    columns: ClassVar[tuple[str, ...]]

    database: str = Field(..., description="Database edition code, e.g. DB3LITE")

    @property
    def csv_name(self) -> str:
        return database_to_csv_name(self.database)
