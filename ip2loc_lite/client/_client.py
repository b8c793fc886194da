import logging
from pathlib import Path
from typing import Any

import httpx

from ip2loc_lite.catalog import ensure_supported_database
from ip2loc_lite.client.session_store import SessionStore
from ip2loc_lite.exceptions import (
    ArchiveMissingError,
    DownloadError,
    NotLoggedInError,
    ReachabilityError,
    TransportError,
)
from ip2loc_lite.repositories import IP2LocRepository, resolve_repository
from ip2loc_lite.types.archive import Archive
from ip2loc_lite.types.portal_session import PortalSession
from ip2loc_lite.types.settings import Settings

logger = logging.getLogger(__name__)

REACHABILITY_TIMEOUT: float = 3.0
ACCOUNT_TIMEOUT: float = 3.0
LOGIN_TIMEOUT: float = 5.0
DOWNLOAD_TIMEOUT: float = 30.0

OK_REASON_PHRASE = "OK"


class IP2LocLiteClient(httpx.Client):
    """Client for the IP2Location LITE portal.

    The session cookie jar is shared with the underlying ``httpx`` client, so
    cookies set by the portal are captured in the session. Nothing is retried
    here; callers own retry policy.
    """

    def __init__(
        self,
        settings: Settings,
        *,
        session: PortalSession | None = None,
        session_store: SessionStore | None = None,
        **kwargs: Any,
    ):
        self.settings = settings
        self.session_store = session_store or SessionStore(settings.cookie_path)
        self.session = session or self.session_store.load()

        kwargs.setdefault("follow_redirects", False)
        timeout = kwargs.pop("timeout", httpx.Timeout(DOWNLOAD_TIMEOUT))

        super().__init__(
            base_url=settings.base_url,
            cookies=self.session.cookie_jar,
            timeout=timeout,
            **kwargs,
        )

    def check_reachable(self) -> bool:
        """Probe the login page. Raises ``ReachabilityError`` unless it answers "OK"."""

        try:
            response = self.get(
                self.settings.login_page_path, timeout=REACHABILITY_TIMEOUT
            )
        except httpx.HTTPError as e:
            logger.warning(f"Login page probe failed: {e}")
            raise ReachabilityError(f"Login page probe failed: {e}") from e

        if response.reason_phrase != OK_REASON_PHRASE:
            logger.warning(
                f"Login page answered {response.status_code} {response.reason_phrase}"
            )
            raise ReachabilityError(
                f"Login page answered {response.status_code} {response.reason_phrase}"
            )

        logger.debug("IP2Location LITE portal is reachable")
        return True

    def check_logged_in(self) -> bool:
        """Probe the account page with the session cookies.

        This is the only check of session validity. A completed non-"OK"
        response raises ``NotLoggedInError``; a failed request raises
        ``TransportError``.
        """

        try:
            response = self.get(
                self.settings.account_page_path, timeout=ACCOUNT_TIMEOUT
            )
        except httpx.HTTPError as e:
            raise TransportError("account page probe", str(e)) from e

        if response.reason_phrase != OK_REASON_PHRASE:
            logger.debug(
                f"Account page answered {response.status_code} {response.reason_phrase}"
            )
            raise NotLoggedInError()

        logger.debug("Session is logged in")
        return True

    def login(self) -> PortalSession:
        """Log in and store the verified session.

        A successful POST does not prove the login worked, so the account page
        is probed afterwards. The stored session is only overwritten once that
        probe succeeds.
        """

        self.check_reachable()

        credentials = self.settings.credentials
        logger.debug(f"Logging in as {credentials.username}")
        try:
            self.post(
                self.settings.login_page_path,
                data=credentials.to_login_form(),
                timeout=LOGIN_TIMEOUT,
            )
        except httpx.HTTPError as e:
            raise TransportError("login", str(e)) from e

        self.check_logged_in()

        self.session_store.save(self.session)
        logger.info(f"Logged in to IP2Location LITE as {credentials.username}")
        return self.session

    def archive_path(self, database: str) -> Path:
        return self.settings.downloads_path.joinpath(f"{database}.csv.zip")

    def download_database(self, database: str) -> Archive:
        """Download the zipped CSV export of ``database``.

        Any previous archive at the same path is deleted before the new one
        is written.
        """

        from tqdm import tqdm

        ensure_supported_database(database, self.settings.databases)
        self.check_logged_in()

        output = self.archive_path(database)
        logger.debug(f"Downloading {database} to '{output}'")

        try:
            with self.stream(
                "GET",
                self.settings.download_page_path,
                params={"code": database},
                timeout=DOWNLOAD_TIMEOUT,
            ) as response:
                if response.reason_phrase != OK_REASON_PHRASE:
                    raise DownloadError(
                        f"download {database}",
                        f"Download page answered {response.status_code} "
                        + f"{response.reason_phrase}",
                    )

                output.parent.mkdir(parents=True, exist_ok=True)
                output.unlink(missing_ok=True)

                total_size = int(response.headers.get("content-length", 0))
                try:
                    with (
                        open(output, "wb") as f,
                        tqdm(
                            desc=f"Downloading {database}",
                            total=total_size or None,
                            unit="B",
                            unit_scale=True,
                            unit_divisor=1024,
                            disable=None,
                        ) as pbar,
                    ):
                        for chunk in response.iter_bytes(chunk_size=8192):
                            f.write(chunk)
                            pbar.update(len(chunk))
                except Exception:
                    output.unlink(missing_ok=True)
                    raise

        except httpx.HTTPError as e:
            logger.error(f"Download of {database} failed: {e}")
            raise DownloadError(f"download {database}", str(e)) from e

        logger.info(f"Downloaded {database} to {output}")
        return Archive(database=database, path=output)

    def has_archive(self, database: str) -> bool:
        return self.archive_path(database).is_file()

    def ensure_archive(self, database: str) -> Archive:
        """Return the downloaded archive or raise ``ArchiveMissingError``."""

        archive = Archive(database=database, path=self.archive_path(database))
        if not archive.exists:
            raise ArchiveMissingError(archive.path)
        return archive

    def load_repository(self, database: str) -> IP2LocRepository:
        return resolve_repository(
            database,
            storage_engine=self.settings.storage_engine,
            supported_databases=self.settings.databases,
        )
