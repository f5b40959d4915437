import contextlib
import logging
import urllib.parse
from dataclasses import dataclass

from .engine import DEFAULT_PORT, Engine, EngineError, Handle, OpenFlag, ServiceKind
from .errors import ConnectError, InvalidURLError, RequestOpenError
from .models import Request

log = logging.getLogger(__name__)

SCHEMES = ("http", "https")


@dataclass(frozen=True)
class Target:
    secure: bool
    host: str
    port: int
    user: str
    password: str
    path: str


@dataclass(frozen=True)
class OpenedRequest:
    connection: Handle
    handle: Handle


def split_host(netloc: str) -> str:
    hostport = netloc.rpartition("@")[2]
    if hostport.startswith("["):
        return hostport[1 : hostport.find("]")]
    return hostport.partition(":")[0]


def parse_target(url: str) -> Target:
    # urlsplit silently strips tabs and newlines instead of failing
    if any(c.isspace() or ord(c) < 0x20 or ord(c) == 0x7F for c in url):
        raise InvalidURLError(f"invalid character in url {url!r}")

    try:
        parts = urllib.parse.urlsplit(url)
        port = parts.port
    except ValueError as e:
        raise InvalidURLError(f"failed to parse url {url}: {e}") from e

    if parts.scheme not in SCHEMES:
        raise InvalidURLError(f"unsupported scheme in url {url}")
    # hostname is lowercased, the engine gets the host as written
    host = split_host(parts.netloc)
    if not host:
        raise InvalidURLError(f"missing host in url {url}")

    path = parts.path or "/"
    if parts.query:
        path += "?" + parts.query

    return Target(
        secure=parts.scheme == "https",
        host=host,
        # the engine picks the scheme default for DEFAULT_PORT
        port=port if port is not None else DEFAULT_PORT,
        user=urllib.parse.unquote(parts.username or ""),
        password=urllib.parse.unquote(parts.password or ""),
        path=path,
    )


def build_request(engine: Engine, session: Handle, request: Request) -> OpenedRequest:
    """Open a connection and an unsent request handle for ``request``."""
    target = parse_target(request.url)
    flags = OpenFlag.SECURE if target.secure else OpenFlag.NONE

    log.debug(f"connecting to {target.host}:{target.port or 'default'}")
    try:
        connection = engine.connect(
            session,
            target.host,
            target.port,
            target.user,
            target.password,
            ServiceKind.HTTP,
            flags,
        )
    except EngineError as e:
        raise ConnectError(f"failed to create connection: {e}") from e

    # keep the connection for multi-step auth such as NTLM
    flags |= OpenFlag.KEEP_CONNECTION

    log.debug(f"opening {request.method} {target.path}")
    try:
        handle = engine.open_request(connection, request.method, target.path, flags)
    except EngineError as e:
        with contextlib.suppress(EngineError):
            engine.close_handle(connection)
        raise RequestOpenError(f"failed to open request: {e}") from e

    return OpenedRequest(connection=connection, handle=handle)
