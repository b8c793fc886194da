from .archive import Archive
from .credentials import Credentials
from .portal_session import PortalSession
from .settings import Settings

__all__ = [
    "Archive",
    "Credentials",
    "PortalSession",
    "Settings",
]
