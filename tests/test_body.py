import pytest
from fake_engine import FakeEngine

from wininet_client.body import read_body
from wininet_client.errors import ReadError

HANDLE = 3


def test_accumulates_chunks_until_zero() -> None:
    engine = FakeEngine().respond(chunks=[b"0123456789", b"abcde"])
    body, length = read_body(engine, HANDLE)
    assert length == 15
    assert body.read() == b"0123456789abcde"
    assert body.read() == b""
    assert [c[2] for c in engine.calls if c[0] == "read_chunk"] == [10, 5]


def test_empty_body() -> None:
    engine = FakeEngine().respond()
    body, length = read_body(engine, HANDLE)
    assert length == 0
    assert body.read() == b""


def test_read_failure_after_two_chunks() -> None:
    engine = FakeEngine().respond(chunks=[b"aa", b"bb", b"cc"])
    engine.read_error_at = 2
    with pytest.raises(ReadError, match="failed to read data"):
        read_body(engine, HANDLE)


def test_available_query_failure() -> None:
    engine = FakeEngine().respond(chunks=[b"aa"])
    engine.available_error_at = 1
    with pytest.raises(ReadError, match="data available"):
        read_body(engine, HANDLE)


def test_short_read() -> None:
    engine = FakeEngine().respond(chunks=[b"abcdef"])
    engine.short_read_at = 0
    with pytest.raises(ReadError, match="short read"):
        read_body(engine, HANDLE)
