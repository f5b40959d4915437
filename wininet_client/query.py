import logging

from .engine import BufferTooSmall, Engine, EngineError, Handle, InfoBytes, InfoKind
from .errors import QueryInfoError

log = logging.getLogger(__name__)


def query_info(
    engine: Engine,
    handle: Handle,
    info: InfoKind,
    index: int = 0,
    buffer_size: int = 0,
) -> bytes:
    """Query a response field, growing the buffer once if the engine asks.

    The first call uses ``buffer_size``. If the engine answers with a size
    hint the query is repeated exactly once with a buffer of that size.
    """
    index = max(index, 0)
    try:
        result = engine.query_info(handle, info, index, buffer_size)
        if isinstance(result, InfoBytes):
            return result.data

        log.debug(f"{info.name}[{index}]: retrying with {result.required_size} bytes")
        result = engine.query_info(handle, info, index, result.required_size)
    except EngineError as e:
        raise QueryInfoError(f"{info.name}[{index}]: {e}") from e

    if isinstance(result, BufferTooSmall):
        raise QueryInfoError(
            f"{info.name}[{index}]: buffer still too small, "
            f"{result.required_size} bytes required"
        )
    return result.data
