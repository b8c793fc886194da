from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class Archive(BaseModel):
    """A downloaded, zipped CSV export for one database edition."""

    model_config: ConfigDict = ConfigDict(frozen=True)

    database: str = Field(..., description="Database edition code, e.g. DB3LITE")
    path: Path = Field(..., description="Location of the .csv.zip file")

    @property
    def exists(self) -> bool:
        return self.path.is_file()

    @property
    def size_bytes(self) -> int:
        return self.path.stat().st_size

    def read_bytes(self) -> bytes:
        return self.path.read_bytes()
