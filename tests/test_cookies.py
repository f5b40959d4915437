from fake_engine import FakeEngine

from wininet_client.cookies import (
    END,
    Found,
    iter_response_cookies,
    parse_cookie,
    probe_cookie,
)
from wininet_client.engine import InfoKind
from wininet_client.models import Cookie

HANDLE = 9


def test_enumerates_until_first_failure() -> None:
    engine = FakeEngine().respond(set_cookies=["a=1", "b=2", "c=3"])
    # index 4 exists but is never reached
    engine.info[(InfoKind.SET_COOKIE, 4)] = b"e=5"
    cookies = list(iter_response_cookies(engine, HANDLE))
    assert cookies == [Cookie("a", "1"), Cookie("b", "2"), Cookie("c", "3")]
    probed = [c[3] for c in engine.calls if c[0] == "query_info" and c[4] == 0]
    assert probed == [0, 1, 2, 3]


def test_no_cookies() -> None:
    engine = FakeEngine().respond()
    assert list(iter_response_cookies(engine, HANDLE)) == []


def test_enumeration_is_lazy() -> None:
    engine = FakeEngine().respond(set_cookies=["a=1", "b=2"])
    cookies = iter_response_cookies(engine, HANDLE)
    assert engine.calls == []
    assert next(cookies) == Cookie("a", "1")
    assert {c[3] for c in engine.calls} == {0}


def test_probe_outcomes() -> None:
    engine = FakeEngine().respond(set_cookies=["sid=abc"])
    assert probe_cookie(engine, HANDLE, 0) == Found(Cookie("sid", "abc"))
    assert probe_cookie(engine, HANDLE, 1) is END


def test_parse_cookie_splits_once() -> None:
    assert parse_cookie("token=a=b") == Cookie("token", "a=b")
    assert parse_cookie("flag") == Cookie("flag", "")
    assert parse_cookie("sid=1; Path=/") == Cookie("sid", "1; Path=/")
