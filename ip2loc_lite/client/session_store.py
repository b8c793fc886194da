"""Cookie jar persistence for the portal session."""

import logging
from datetime import datetime, timezone
from http.cookiejar import LoadError, LWPCookieJar
from pathlib import Path

from ip2loc_lite.types.portal_session import PortalSession

logger = logging.getLogger(__name__)


class SessionStore:
    """Loads and saves the portal session cookie jar.

    Sessions are overwritten by each verified login and never removed here;
    a stale session is simply superseded.
    """

    def __init__(self, cookie_path: Path | str):
        """Initialize session store.

        Args:
            cookie_path: File holding the LWP formatted cookie jar
        """
        self.cookie_path = Path(cookie_path)

    def load(self) -> PortalSession:
        """Load the stored session, or an empty one.

        Missing or unreadable files give an empty session; an unreadable file
        is left on disk untouched.
        """
        session = PortalSession.empty(self.cookie_path)

        if not self.cookie_path.is_file():
            logger.debug(f"No stored session found at {self.cookie_path}")
            return session

        try:
            session.cookie_jar.load(ignore_discard=True, ignore_expires=True)
        except (LoadError, OSError, ValueError) as e:
            logger.warning(f"Failed to load stored session {self.cookie_path}: {e}")
            return PortalSession.empty(self.cookie_path)

        session.created_at = datetime.fromtimestamp(
            self.cookie_path.stat().st_mtime, tz=timezone.utc
        )
        logger.debug(
            f"Loaded stored session with {len(session.cookie_jar)} cookie(s) "
            + f"from {self.cookie_path}"
        )
        return session

    def save(self, session: PortalSession) -> PortalSession:
        """Write the session cookie jar, replacing whatever was stored."""
        self.cookie_path.parent.mkdir(parents=True, exist_ok=True)
        session.cookie_jar.save(
            str(self.cookie_path), ignore_discard=True, ignore_expires=True
        )
        session.cookie_path = self.cookie_path
        session.created_at = datetime.now(timezone.utc)
        logger.debug(f"Session saved to {self.cookie_path}")
        return session

    def exists(self) -> bool:
        return self.cookie_path.is_file()
