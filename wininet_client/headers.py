"""Ordered multi-valued headers and the raw header block parser."""

from collections.abc import Iterable, Iterator, MutableMapping
from dataclasses import dataclass, field

from .errors import ProtocolError

CRLF = "\r\n"
SEPARATOR = ": "


class Headers(MutableMapping[str, list[str]]):
    """Header mapping that keeps every value of a key in arrival order.

    Keys are case-sensitive: ``Set-Cookie`` and ``set-cookie`` are distinct.
    """

    def __init__(self, items: Iterable[tuple[str, str]] = ()) -> None:
        self._values: dict[str, list[str]] = {}
        for key, value in items:
            self.add(key, value)

    def add(self, key: str, value: str) -> None:
        self._values.setdefault(key, []).append(value)

    def get_first(self, key: str, default: str | None = None) -> str | None:
        values = self._values.get(key)
        if not values:
            return default
        return values[0]

    def items_flat(self) -> Iterator[tuple[str, str]]:
        for key, values in self._values.items():
            for value in values:
                yield key, value

    def count(self) -> int:
        return sum(len(values) for values in self._values.values())

    def __getitem__(self, key: str) -> list[str]:
        return self._values[key]

    def __setitem__(self, key: str, values: list[str]) -> None:
        self._values[key] = list(values)

    def __delitem__(self, key: str) -> None:
        del self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Headers):
            return self._values == other._values
        if isinstance(other, dict):
            return self._values == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"Headers({self._values!r})"


@dataclass
class HeaderBlock:
    proto: str = ""
    proto_major: int = 0
    proto_minor: int = 0
    headers: Headers = field(default_factory=Headers)


def parse_version(proto: str) -> tuple[int, int]:
    parts = proto.split(".")
    if len(parts) < 2:
        return 0, 0
    try:
        return int(parts[0].replace("HTTP/", "", 1)), int(parts[1])
    except ValueError as e:
        raise ProtocolError(f"invalid HTTP version {proto!r}") from e


def parse_header_block(text: str) -> HeaderBlock:
    """Split a CRLF delimited header block into headers and protocol version.

    Lines that are neither ``key: value`` nor the ``HTTP/x.y`` status line
    are dropped.
    """
    block = HeaderBlock()
    for line in text.split(CRLF):
        parts = line.split(SEPARATOR, 1)
        if len(parts) == 2:
            block.headers.add(parts[0], parts[1])
        elif line.startswith("HTTP"):
            block.proto = line.split()[0]
            block.proto_major, block.proto_minor = parse_version(block.proto)
    return block
