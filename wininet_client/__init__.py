import logging
import os

from .client import Client
from .custom_logger import setup_logging
from .engine import (
    DEFAULT_PORT,
    BufferTooSmall,
    Engine,
    EngineError,
    Handle,
    HeaderMode,
    InfoBytes,
    InfoKind,
    OpenFlag,
    ServiceKind,
)
from .errors import (
    ConnectError,
    HeaderError,
    InvalidURLError,
    ProtocolError,
    QueryInfoError,
    ReadError,
    RequestOpenError,
    SendError,
    WininetError,
)
from .headers import Headers
from .models import Cookie, Request, Response
from .settings import Settings

LOGLEVEL = os.environ.get("LOGLEVEL", "WARNING").upper()

log = logging.getLogger(__name__)
# applications configure logging themselves unless LOGLEVEL asks for ours
if "LOGLEVEL" in os.environ:
    setup_logging(LOGLEVEL)
    log.info(f"Log level set to {LOGLEVEL}")

__all__ = [
    "DEFAULT_PORT",
    "BufferTooSmall",
    "Client",
    "ConnectError",
    "Cookie",
    "Engine",
    "EngineError",
    "Handle",
    "HeaderError",
    "HeaderMode",
    "Headers",
    "InfoBytes",
    "InfoKind",
    "InvalidURLError",
    "OpenFlag",
    "ProtocolError",
    "QueryInfoError",
    "ReadError",
    "Request",
    "RequestOpenError",
    "Response",
    "SendError",
    "ServiceKind",
    "Settings",
    "WininetError",
    "setup_logging",
]
