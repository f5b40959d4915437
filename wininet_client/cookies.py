import logging
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

from .engine import Engine, Handle, InfoKind
from .errors import QueryInfoError
from .models import Cookie
from .query import query_info

log = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Found(Generic[T]):
    value: T


class EndOfSequence(Enum):
    END = "end"


END = EndOfSequence.END


def parse_cookie(text: str) -> Cookie:
    name, _, value = text.partition("=")
    return Cookie(name=name, value=value)


def probe_cookie(
    engine: Engine,
    handle: Handle,
    index: int,
    encoding: str = "iso-8859-1",
    buffer_size: int = 0,
) -> Found[Cookie] | EndOfSequence:
    try:
        raw = query_info(engine, handle, InfoKind.SET_COOKIE, index, buffer_size)
    except QueryInfoError as e:
        # the first missing index terminates the sequence
        log.debug(f"cookie enumeration stopped at index {index}: {e}")
        return END
    return Found(parse_cookie(raw.decode(encoding)))


def iter_response_cookies(
    engine: Engine,
    handle: Handle,
    encoding: str = "iso-8859-1",
    buffer_size: int = 0,
) -> Iterator[Cookie]:
    """Yield the Set-Cookie values of a response, probing index 0, 1, 2, ...

    The generator cannot be restarted; enumerate again from index 0 by
    calling this function a second time.
    """
    index = 0
    while True:
        probe = probe_cookie(engine, handle, index, encoding, buffer_size)
        if isinstance(probe, EndOfSequence):
            return
        yield probe.value
        index += 1
