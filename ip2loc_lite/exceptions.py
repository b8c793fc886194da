"""Custom exceptions for IP2Location LITE portal operations."""

from pathlib import Path


class IP2LocLiteError(Exception):
    """Base class for every error raised by the portal client."""

    default_message: str = "IP2Location LITE operation failed"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ReachabilityError(IP2LocLiteError):
    """Raised when the login page cannot be fetched or does not answer "OK".

    Fatal to the current login attempt.
    """

    default_message = "IP2Location LITE portal is not reachable"


class NotLoggedInError(IP2LocLiteError):
    """Raised when the account page probe does not answer "OK".

    The stored session is not trusted, but it is left in place.
    """

    default_message = "Not logged in to IP2Location LITE portal, login required"


class UnsupportedDatabaseError(IP2LocLiteError):
    default_message = "Unsupported IP2Location LITE database"

    def __init__(self, database: str, message: str | None = None):
        self.database = database
        super().__init__(message or f"{self.default_message}: {database!r}")


class ArchiveMissingError(IP2LocLiteError):
    """Raised when a downloaded archive is absent, meaning a download is needed."""

    default_message = "Database archive is missing, download required"

    def __init__(self, path: Path, message: str | None = None):
        self.path = path
        super().__init__(message or f"{self.default_message}: {path}")


class UnsupportedStorageEngineError(IP2LocLiteError):
    default_message = "Unsupported storage engine"

    def __init__(self, engine: str, message: str | None = None):
        self.engine = engine
        super().__init__(message or f"{self.default_message}: {engine!r}")


class TransportError(IP2LocLiteError):
    """Raised when an HTTP call fails before a response is received.

    Wraps the underlying ``httpx`` error, available as ``__cause__``.
    """

    default_message = "HTTP transport failure"

    def __init__(self, operation: str, message: str | None = None):
        self.operation = operation
        super().__init__(f"{operation}: {message or self.default_message}")


class DownloadError(TransportError):
    """Raised when the database download itself fails."""

    default_message = "Database download failed"
