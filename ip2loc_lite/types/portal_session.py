from datetime import datetime, timezone
from http.cookiejar import LWPCookieJar
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class PortalSession(BaseModel):
    """Cookie based session state for the portal.

    Validity is never derived from ``created_at``; only a successful account
    page probe proves the session is logged in.
    """

    model_config: ConfigDict = ConfigDict(arbitrary_types_allowed=True)

    cookie_path: Path = Field(..., description="Backing cookie jar file")
    cookie_jar: LWPCookieJar = Field(..., description="Live cookie jar", exclude=True)
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When the stored session was last written",
    )

    @classmethod
    def empty(cls, cookie_path: Path) -> "PortalSession":
        return cls(cookie_path=cookie_path, cookie_jar=LWPCookieJar(str(cookie_path)))

    @property
    def cookie_names(self) -> list[str]:
        return sorted({cookie.name for cookie in self.cookie_jar})
