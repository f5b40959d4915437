import io
import logging
from typing import BinaryIO

from .engine import Engine, EngineError, Handle
from .errors import ReadError

log = logging.getLogger(__name__)


def read_body(engine: Engine, handle: Handle) -> tuple[BinaryIO, int]:
    """Drain the response body until the engine reports nothing available.

    Returns the body as a readable stream together with its byte count.
    """
    body = bytearray()
    content_length = 0

    while True:
        try:
            available = engine.query_data_available(handle)
        except EngineError as e:
            raise ReadError(f"failed to query data available: {e}") from e

        if available == 0:
            break

        try:
            chunk = engine.read_chunk(handle, available)
        except EngineError as e:
            raise ReadError(f"failed to read data: {e}") from e
        if len(chunk) != available:
            raise ReadError(f"short read: got {len(chunk)} of {available} bytes")

        log.debug(f"read chunk of {available} bytes")
        content_length += available
        body.extend(chunk)

    return io.BytesIO(bytes(body)), content_length
