import pytest
from fake_engine import FakeEngine

from wininet_client.engine import EngineError, HeaderMode
from wininet_client.errors import HeaderError, SendError
from wininet_client.models import Cookie, Request
from wininet_client.sender import send_request
from wininet_client.settings import Settings

HANDLE = 5
ADD_REPLACE = HeaderMode.ADD | HeaderMode.REPLACE


def make_request() -> Request:
    return Request(
        "POST",
        "http://example.com/",
        headers={"Content-Type": "application/json", "content-type": "text/plain"},
        cookies=[Cookie("b", "2"), Cookie("a", "1")],
        body=b'{"x": 1}',
    )


def test_sentinel_cookies_headers_then_send(
    engine: FakeEngine, settings: Settings
) -> None:
    send_request(engine, HANDLE, make_request(), settings)

    assert engine.headers_added == [
        ("Cookie: ignore=ignore", HeaderMode.ADD_IF_NEW),
        ("Cookie: b=2", HeaderMode.ADD),
        ("Cookie: a=1", HeaderMode.ADD),
        ("Content-Type: application/json", ADD_REPLACE),
        ("content-type: text/plain", ADD_REPLACE),
    ]
    assert engine.calls[-1] == ("send_request", HANDLE, "", b'{"x": 1}')


def test_sentinel_can_be_disabled(engine: FakeEngine) -> None:
    send_request(engine, HANDLE, make_request(), Settings(sentinel_cookie=False))
    assert engine.headers_added[0] == ("Cookie: b=2", HeaderMode.ADD)


def test_rejected_sentinel_is_ignored(engine: FakeEngine, settings: Settings) -> None:
    engine.header_errors["Cookie: ignore"] = EngineError(12150, "rejected")
    send_request(engine, HANDLE, make_request(), settings)
    assert engine.sent_body == b'{"x": 1}'


def test_header_failure_is_fail_fast(engine: FakeEngine, settings: Settings) -> None:
    engine.header_errors["Cookie: a"] = EngineError(87, "invalid parameter")
    with pytest.raises(HeaderError):
        send_request(engine, HANDLE, make_request(), settings)
    # earlier headers stay attached, nothing after the failure is attempted
    assert [line for line, _ in engine.headers_added] == [
        "Cookie: ignore=ignore",
        "Cookie: b=2",
    ]
    assert "send_request" not in engine.names()


def test_send_failure(engine: FakeEngine, settings: Settings) -> None:
    engine.send_error = EngineError(12002, "timeout")
    with pytest.raises(SendError, match="timeout"):
        send_request(engine, HANDLE, make_request(), settings)
