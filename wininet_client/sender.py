import logging

from .engine import Engine, EngineError, Handle, HeaderMode
from .errors import HeaderError, SendError
from .models import Request
from .settings import Settings

log = logging.getLogger(__name__)


def add_header(engine: Engine, handle: Handle, line: str, mode: HeaderMode) -> None:
    try:
        engine.add_headers(handle, line, mode)
    except EngineError as e:
        raise HeaderError(f"failed to add {line.split(':', 1)[0]!r}: {e}") from e


def attach_cookies(
    engine: Engine, handle: Handle, request: Request, settings: Settings
) -> None:
    if settings.sentinel_cookie:
        # the engine rejects the first add-if-new cookie header it sees, so
        # the outcome of the placeholder is not checked
        try:
            engine.add_headers(
                handle, settings.sentinel_cookie_header, HeaderMode.ADD_IF_NEW
            )
        except EngineError as e:
            log.debug(f"sentinel cookie header rejected: {e}")

    for cookie in request.cookies:
        add_header(engine, handle, f"Cookie: {cookie}", HeaderMode.ADD)


def attach_headers(engine: Engine, handle: Handle, request: Request) -> None:
    for key, value in request.headers.items():
        add_header(
            engine, handle, f"{key}: {value}", HeaderMode.ADD | HeaderMode.REPLACE
        )


def send_request(
    engine: Engine, handle: Handle, request: Request, settings: Settings
) -> None:
    """Attach cookies and headers to an opened request, then transmit it.

    Headers already attached are left in place when a later one fails.
    """
    attach_cookies(engine, handle, request, settings)
    attach_headers(engine, handle, request)
    log.debug(
        f"sending {request} with {len(request.headers)} headers, "
        f"{len(request.body)} body bytes"
    )
    try:
        engine.send_request(handle, "", request.body)
    except EngineError as e:
        raise SendError(f"failed to send request: {e}") from e
