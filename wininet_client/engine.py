from dataclasses import dataclass
from enum import IntEnum, IntFlag
from typing import Protocol

Handle = int

# tells the engine to use the scheme's default port
DEFAULT_PORT = 0


class ServiceKind(IntEnum):
    HTTP = 3


class OpenFlag(IntFlag):
    NONE = 0
    SECURE = 0x00800000
    KEEP_CONNECTION = 0x00400000


class HeaderMode(IntFlag):
    ADD_IF_NEW = 0x10000000
    ADD = 0x20000000
    REPLACE = 0x80000000


class InfoKind(IntEnum):
    STATUS_CODE = 19
    STATUS_TEXT = 20
    RAW_HEADERS_CRLF = 22
    SET_COOKIE = 43


class EngineError(Exception):
    code: int
    message: str

    def __init__(self, code: int, message: str = "") -> None:
        super().__init__(f"{code} {message}".strip())
        self.code = code
        self.message = message


@dataclass(frozen=True)
class InfoBytes:
    data: bytes


@dataclass(frozen=True)
class BufferTooSmall:
    required_size: int


QueryResult = InfoBytes | BufferTooSmall


class Engine(Protocol):
    """Handle based primitives of the native internet-access library.

    Every method blocks until the engine answers and raises EngineError on
    failure. query_info is the exception: a buffer that is too small is
    reported as a BufferTooSmall value carrying the size the engine needs.
    """

    def connect(
        self,
        session: Handle,
        host: str,
        port: int,
        user: str,
        password: str,
        service: ServiceKind,
        flags: OpenFlag,
    ) -> Handle: ...

    def open_request(
        self, connection: Handle, method: str, target: str, flags: OpenFlag
    ) -> Handle: ...

    def add_headers(self, request: Handle, line: str, mode: HeaderMode) -> None: ...

    def send_request(self, request: Handle, headers: str, body: bytes) -> None: ...

    def query_info(
        self, request: Handle, info: InfoKind, index: int, buffer_size: int
    ) -> QueryResult: ...

    def query_data_available(self, request: Handle) -> int: ...

    def read_chunk(self, request: Handle, size: int) -> bytes: ...

    def close_handle(self, handle: Handle) -> None: ...
