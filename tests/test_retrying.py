import httpx
import pytest

from ip2loc_lite import NotLoggedInError, ReachabilityError
from ip2loc_lite.retrying import login_with_retry


def test_retries_unreachable_portal(client, portal):
    failures = iter([True, True, False])

    def flaky(request):
        if next(failures):
            raise httpx.ConnectError("connection refused", request=request)
        return httpx.Response(200)

    portal.login_page = flaky
    session = login_with_retry(client, attempts=3, min_wait=0, max_wait=0)

    assert "PHPSESSID" in session.cookie_names
    assert portal.paths("GET").count("/login") == 3


def test_gives_up_after_attempts(client, portal):
    portal.login_page = lambda request: httpx.Response(503)

    with pytest.raises(ReachabilityError):
        login_with_retry(client, attempts=2, min_wait=0, max_wait=0)
    assert portal.paths("GET").count("/login") == 2


def test_rejected_login_is_not_retried(client, portal):
    portal.account_page = lambda request: httpx.Response(
        302, headers={"location": "/login"}
    )

    with pytest.raises(NotLoggedInError):
        login_with_retry(client, attempts=3, min_wait=0, max_wait=0)
    assert len(portal.paths("POST")) == 1
