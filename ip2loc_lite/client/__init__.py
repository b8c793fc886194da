from ip2loc_lite.types.archive import Archive
from ip2loc_lite.types.portal_session import PortalSession

from ._client import IP2LocLiteClient
from .session_store import SessionStore

__all__ = [
    "Archive",
    "IP2LocLiteClient",
    "PortalSession",
    "SessionStore",
]
