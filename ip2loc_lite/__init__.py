from pathlib import Path
from typing import Final

__version__: Final[str] = "0.1.0"

IP2LOC_USERNAME_NAME: Final[str] = "IP2LOC_LITE_USERNAME"
IP2LOC_PASSWORD_NAME: Final[str] = "IP2LOC_LITE_PASSWORD"
IP2LOC_REMEMBER_ME_NAME: Final[str] = "IP2LOC_LITE_REMEMBER_ME"
IP2LOC_STORAGE_PATH_NAME: Final[str] = "IP2LOC_LITE_STORAGE_PATH"
IP2LOC_STORAGE_ENGINE_NAME: Final[str] = "IP2LOC_LITE_STORAGE"
IP2LOC_DATABASES_NAME: Final[str] = "IP2LOC_LITE_DATABASES"

DEFAULT_BASE_URL: Final[str] = "https://lite.ip2location.com"
DEFAULT_LOGIN_PAGE_PATH: Final[str] = "/login"
DEFAULT_ACCOUNT_PAGE_PATH: Final[str] = "/account"
DEFAULT_DOWNLOAD_PAGE_PATH: Final[str] = "/download"
DEFAULT_STORAGE_PATH: Final[Path] = Path("~/.cache/ip2loc-lite").expanduser()
DEFAULT_SESSION_FILENAME: Final[str] = "session.lwp"
DEFAULT_STORAGE_ENGINE: Final[str] = "mysql"
DEFAULT_DATABASES: Final[tuple[str, ...]] = (
    "DB1LITE",
    "DB3LITE",
    "DB5LITE",
    "DB9LITE",
    "DB11LITE",
)

__all__ = [
    "DEFAULT_DATABASES",
    "DEFAULT_STORAGE_PATH",
    "__version__",
]

from .client import IP2LocLiteClient, SessionStore  # noqa: E402
from .exceptions import (  # noqa: E402
    ArchiveMissingError,
    DownloadError,
    IP2LocLiteError,
    NotLoggedInError,
    ReachabilityError,
    TransportError,
    UnsupportedDatabaseError,
    UnsupportedStorageEngineError,
)
from .repositories import resolve_repository  # noqa: E402
from .types import Settings  # noqa: E402

__all__ += [
    "ArchiveMissingError",
    "DownloadError",
    "IP2LocLiteClient",
    "IP2LocLiteError",
    "NotLoggedInError",
    "ReachabilityError",
    "SessionStore",
    "Settings",
    "TransportError",
    "UnsupportedDatabaseError",
    "UnsupportedStorageEngineError",
    "resolve_repository",
]
