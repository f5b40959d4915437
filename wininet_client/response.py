import logging

from .body import read_body
from .cookies import iter_response_cookies
from .engine import Engine, Handle, InfoKind
from .errors import ProtocolError, QueryInfoError
from .headers import parse_header_block
from .models import Request, Response
from .query import query_info
from .settings import Settings

log = logging.getLogger(__name__)


def get_status(engine: Engine, handle: Handle, settings: Settings) -> tuple[int, str]:
    try:
        raw = query_info(
            engine, handle, InfoKind.STATUS_CODE, 0, settings.initial_buffer_size
        )
    except QueryInfoError as e:
        raise ProtocolError(f"missing status code: {e}") from e

    status = raw.decode(settings.header_encoding)
    # int() also takes whitespace, underscores and non-ascii digits
    if not status.isascii() or not status.isdigit():
        raise ProtocolError(f"status {status!r} invalid")
    code = int(status)

    try:
        text = query_info(
            engine, handle, InfoKind.STATUS_TEXT, 0, settings.initial_buffer_size
        ).decode(settings.header_encoding)
    except QueryInfoError as e:
        log.debug(f"no status text: {e}")
        text = ""

    if text:
        status = f"{status} {text}"
    return code, status


def build_response(
    engine: Engine, handle: Handle, request: Request, settings: Settings
) -> Response:
    """Collect status, headers, cookies and body of a sent request.

    Cookies of the request come first, followed by the ones the server set.
    """
    code, status = get_status(engine, handle, settings)

    raw_headers = query_info(
        engine, handle, InfoKind.RAW_HEADERS_CRLF, 0, settings.initial_buffer_size
    )
    block = parse_header_block(raw_headers.decode(settings.header_encoding))

    set_cookies = list(
        iter_response_cookies(
            engine, handle, settings.header_encoding, settings.initial_buffer_size
        )
    )

    body, content_length = read_body(engine, handle)

    response = Response(
        status_code=code,
        status=status,
        proto=block.proto,
        proto_major=block.proto_major,
        proto_minor=block.proto_minor,
        headers=block.headers,
        body=body,
        content_length=content_length,
    )
    for cookie in request.cookies:
        response.add_cookie(cookie)
    for cookie in set_cookies:
        response.add_cookie(cookie)

    return response
