"""Opt-in retry for callers that want it; the client itself never retries."""

import logging

from tenacity import (
    Retrying,
    before_sleep_log,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from ip2loc_lite.client import IP2LocLiteClient
from ip2loc_lite.exceptions import ReachabilityError, TransportError
from ip2loc_lite.types.portal_session import PortalSession

logger = logging.getLogger(__name__)


def login_with_retry(
    client: IP2LocLiteClient,
    attempts: int = 3,
    *,
    min_wait: float = 1.0,
    max_wait: float = 30.0,
) -> PortalSession:
    """Call ``client.login()``, retrying only on reachability or transport errors.

    ``NotLoggedInError`` means the portal rejected the login and is raised
    straight away.
    """

    retrying = Retrying(
        stop=stop_after_attempt(attempts),
        wait=wait_exponential(multiplier=1, min=min_wait, max=max_wait),
        retry=retry_if_exception_type((ReachabilityError, TransportError)),
        before_sleep=before_sleep_log(logger, logging.WARNING),
        reraise=True,
    )
    return retrying(client.login)
