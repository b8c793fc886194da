import os
from http.cookiejar import Cookie

from ip2loc_lite.client import SessionStore
from ip2loc_lite.types import PortalSession


def make_cookie(name: str, value: str) -> Cookie:
    return Cookie(
        version=0,
        name=name,
        value=value,
        port=None,
        port_specified=False,
        domain="lite.ip2location.com",
        domain_specified=False,
        domain_initial_dot=False,
        path="/",
        path_specified=True,
        secure=False,
        expires=None,
        discard=True,
        comment=None,
        comment_url=None,
        rest={},
    )


def test_load_missing_file(tmp_path):
    cookie_path = tmp_path.joinpath("cookies", "session.lwp")
    session = SessionStore(cookie_path).load()

    assert session.cookie_path == cookie_path
    assert session.cookie_names == []
    assert not cookie_path.exists()


def test_save_and_load_session_cookies(tmp_path):
    cookie_path = tmp_path.joinpath("cookies", "session.lwp")
    store = SessionStore(cookie_path)

    session = PortalSession.empty(cookie_path)
    session.cookie_jar.set_cookie(make_cookie("PHPSESSID", "abc"))
    store.save(session)

    assert store.exists()
    loaded = store.load()
    assert loaded.cookie_names == ["PHPSESSID"]
    cookie = next(iter(loaded.cookie_jar))
    assert cookie.value == "abc"
    assert cookie.domain == "lite.ip2location.com"


def test_save_overwrites(tmp_path):
    cookie_path = tmp_path.joinpath("session.lwp")
    store = SessionStore(cookie_path)

    first = PortalSession.empty(cookie_path)
    first.cookie_jar.set_cookie(make_cookie("PHPSESSID", "old"))
    store.save(first)

    second = PortalSession.empty(cookie_path)
    second.cookie_jar.set_cookie(make_cookie("PHPSESSID", "new"))
    store.save(second)

    assert [c.value for c in store.load().cookie_jar] == ["new"]


def test_created_at_follows_file(tmp_path):
    cookie_path = tmp_path.joinpath("session.lwp")
    store = SessionStore(cookie_path)
    store.save(PortalSession.empty(cookie_path))
    os.utime(cookie_path, (1_700_000_000, 1_700_000_000))

    assert store.load().created_at.timestamp() == 1_700_000_000


def test_corrupt_file_gives_empty_session(tmp_path):
    cookie_path = tmp_path.joinpath("session.lwp")
    cookie_path.write_text("this is not a cookie jar\n")

    session = SessionStore(cookie_path).load()

    assert session.cookie_names == []
    assert cookie_path.read_text() == "this is not a cookie jar\n"


def test_binary_file_gives_empty_session(tmp_path):
    cookie_path = tmp_path.joinpath("session.lwp")
    cookie_path.write_bytes(b"\x89PNG\r\n\x1a\n\xff\xff")

    session = SessionStore(cookie_path).load()

    assert session.cookie_names == []
    assert cookie_path.read_bytes() == b"\x89PNG\r\n\x1a\n\xff\xff"
