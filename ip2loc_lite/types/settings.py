import os
from typing import Any
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ip2loc_lite import (
    DEFAULT_ACCOUNT_PAGE_PATH,
    DEFAULT_BASE_URL,
    DEFAULT_DATABASES,
    DEFAULT_DOWNLOAD_PAGE_PATH,
    DEFAULT_LOGIN_PAGE_PATH,
    DEFAULT_SESSION_FILENAME,
    DEFAULT_STORAGE_ENGINE,
    DEFAULT_STORAGE_PATH,
    IP2LOC_DATABASES_NAME,
    IP2LOC_PASSWORD_NAME,
    IP2LOC_REMEMBER_ME_NAME,
    IP2LOC_STORAGE_ENGINE_NAME,
    IP2LOC_STORAGE_PATH_NAME,
    IP2LOC_USERNAME_NAME,
)
from ip2loc_lite.types.credentials import Credentials

error_credentials_missing_msg = (
    "The IP2Location LITE credentials are not set. "
    + "Please provide them as arguments or "
    + f"set the `{IP2LOC_USERNAME_NAME}` and `{IP2LOC_PASSWORD_NAME}` "
    + "environment variables."
)


class Settings(BaseModel):
    """Configuration consumed by the portal client and repository resolver."""

    model_config: ConfigDict = ConfigDict(frozen=True)

    credentials: Credentials
    base_url: str = Field(default=DEFAULT_BASE_URL)
    login_page_path: str = Field(default=DEFAULT_LOGIN_PAGE_PATH)
    account_page_path: str = Field(default=DEFAULT_ACCOUNT_PAGE_PATH)
    download_page_path: str = Field(default=DEFAULT_DOWNLOAD_PAGE_PATH)
    storage_path: Path = Field(default=DEFAULT_STORAGE_PATH)
    session_filename: str = Field(default=DEFAULT_SESSION_FILENAME)
    storage_engine: str = Field(default=DEFAULT_STORAGE_ENGINE)
    databases: tuple[str, ...] = Field(default=DEFAULT_DATABASES)

    @field_validator("storage_path", mode="after")
    @classmethod
    def _expand_storage_path(cls, value: Path) -> Path:
        return value.expanduser()

    @property
    def downloads_path(self) -> Path:
        return self.storage_path.joinpath("downloads")

    @property
    def cookie_path(self) -> Path:
        return self.storage_path.joinpath("cookies", self.session_filename)

    @classmethod
    def from_env(
        cls,
        *,
        username: str | None = None,
        password: str | None = None,
        **kwargs: Any,
    ) -> "Settings":
        """Build settings from arguments, falling back to environment variables."""

        if username is None:
            username = os.getenv(IP2LOC_USERNAME_NAME)
        if password is None:
            password = os.getenv(IP2LOC_PASSWORD_NAME)
        if not username or not password:
            raise ValueError(error_credentials_missing_msg)

        remember_me = os.getenv(IP2LOC_REMEMBER_ME_NAME, "1").strip().lower()
        credentials = Credentials(
            username=username,
            password=password,
            remember_me=remember_me not in ("0", "false", "no", "off"),
        )

        if "storage_path" not in kwargs and (
            storage_path := os.getenv(IP2LOC_STORAGE_PATH_NAME)
        ):
            kwargs["storage_path"] = Path(storage_path)
        if "storage_engine" not in kwargs and (
            storage_engine := os.getenv(IP2LOC_STORAGE_ENGINE_NAME)
        ):
            kwargs["storage_engine"] = storage_engine
        if "databases" not in kwargs and (databases := os.getenv(IP2LOC_DATABASES_NAME)):
            kwargs["databases"] = tuple(
                db.strip() for db in databases.split(",") if db.strip()
            )

        return cls(credentials=credentials, **kwargs)
