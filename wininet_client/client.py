import logging
from typing import Any

from .engine import Engine, EngineError, Handle
from .models import Cookie, Request, Response
from .request_builder import build_request
from .response import build_response
from .sender import send_request
from .settings import Settings

log = logging.getLogger(__name__)


class Client:
    """Runs request/response cycles over a session owned by the caller.

    The session is borrowed: timeouts and proxies are configured on it before
    it is handed over, and it is never closed here.
    """

    def __init__(
        self, engine: Engine, session: Handle, settings: Settings | None = None
    ) -> None:
        self.engine = engine
        self.session = session
        self.settings = settings if settings is not None else Settings()

    def send(self, request: Request) -> Response:
        opened = build_request(self.engine, self.session, request)
        try:
            send_request(self.engine, opened.handle, request, self.settings)
            response = build_response(
                self.engine, opened.handle, request, self.settings
            )
        finally:
            self._close(opened.handle)
            self._close(opened.connection)

        log.info(f"{request}: {response}")
        return response

    def _close(self, handle: Handle) -> None:
        try:
            self.engine.close_handle(handle)
        except EngineError as e:
            log.warning(f"failed to close handle {handle}: {e}")

    def request(
        self,
        method: str,
        url: str,
        headers: dict[str, str] | None = None,
        cookies: list[Cookie] | None = None,
        body: bytes = b"",
    ) -> Response:
        return self.send(
            Request(
                method=method,
                url=url,
                headers=dict(headers or {}),
                cookies=list(cookies or []),
                body=body,
            )
        )

    def get(self, url: str, **kwargs: Any) -> Response:
        return self.request("GET", url, **kwargs)

    def post(self, url: str, body: bytes, **kwargs: Any) -> Response:
        log.debug(f"POST {url} {len(body)} bytes")
        return self.request("POST", url, body=body, **kwargs)
