from pathlib import Path
from typing import Callable
from urllib.parse import parse_qs

import httpx
import pytest

from ip2loc_lite import IP2LocLiteClient, Settings
from ip2loc_lite.types import Credentials

USERNAME = "analyst@example.com"
PASSWORD = "correct-horse"
SESSION_COOKIE = "PHPSESSID"
VALID_SESSION = "valid-session"


class FakePortal:
    """Simulates the login, account and download pages of the portal."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.login_page: Callable[[httpx.Request], httpx.Response] | None = None
        self.login_submit: Callable[[httpx.Request], httpx.Response] | None = None
        self.account_page: Callable[[httpx.Request], httpx.Response] | None = None
        self.download_page: Callable[[httpx.Request], httpx.Response] | None = None
        self.downloads: int = 0

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path

        if path == "/login" and request.method == "GET":
            return (self.login_page or self._login_form)(request)
        if path == "/login" and request.method == "POST":
            return (self.login_submit or self._submit_login)(request)
        if path == "/account":
            return (self.account_page or self._account)(request)
        if path == "/download":
            return (self.download_page or self._download)(request)
        return httpx.Response(404)

    def paths(self, method: str | None = None) -> list[str]:
        return [
            r.url.path for r in self.requests if method is None or r.method == method
        ]

    def _login_form(self, request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<form>login</form>")

    def _submit_login(self, request: httpx.Request) -> httpx.Response:
        form = parse_qs(request.content.decode())
        if form.get("emailAddress") == [USERNAME] and form.get("password") == [
            PASSWORD
        ]:
            return httpx.Response(
                200,
                headers={"set-cookie": f"{SESSION_COOKIE}={VALID_SESSION}; Path=/"},
                text="<p>Welcome</p>",
            )
        # The portal answers 200 with an error page on bad credentials
        return httpx.Response(200, text="<p>Invalid e-mail or password</p>")

    def _account(self, request: httpx.Request) -> httpx.Response:
        if f"{SESSION_COOKIE}={VALID_SESSION}" in request.headers.get("cookie", ""):
            return httpx.Response(200, text="<p>My account</p>")
        return httpx.Response(302, headers={"location": "/login"})

    def _download(self, request: httpx.Request) -> httpx.Response:
        if f"{SESSION_COOKIE}={VALID_SESSION}" not in request.headers.get("cookie", ""):
            return httpx.Response(302, headers={"location": "/login"})
        self.downloads += 1
        code = request.url.params["code"]
        return httpx.Response(200, content=f"{code}-archive-{self.downloads}".encode())


def timeout_of(request: httpx.Request) -> float:
    return request.extensions["timeout"]["read"]


@pytest.fixture
def portal() -> FakePortal:
    return FakePortal()


@pytest.fixture
def storage_path(tmp_path: Path) -> Path:
    return tmp_path.joinpath("ip2loc")


def make_settings(storage_path: Path, password: str = PASSWORD, **kwargs) -> Settings:
    return Settings(
        credentials=Credentials(username=USERNAME, password=password),
        storage_path=storage_path,
        **kwargs,
    )


@pytest.fixture
def settings(storage_path: Path) -> Settings:
    return make_settings(storage_path, databases=("DB3LITE",))


@pytest.fixture
def make_client(portal: FakePortal):
    clients: list[IP2LocLiteClient] = []

    def _make_client(settings: Settings, **kwargs) -> IP2LocLiteClient:
        client = IP2LocLiteClient(
            settings, transport=httpx.MockTransport(portal), **kwargs
        )
        clients.append(client)
        return client

    yield _make_client

    for client in clients:
        client.close()


@pytest.fixture
def client(make_client, settings: Settings) -> IP2LocLiteClient:
    return make_client(settings)
