from typing import ClassVar


class WininetError(Exception):
    operation: ClassVar[str] = "request"

    def __init__(self, message: str) -> None:
        super().__init__(f"{self.operation}: {message}")
        self.message = message


class InvalidURLError(WininetError):
    operation = "parse url"


class ConnectError(WininetError):
    operation = "connect"


class RequestOpenError(WininetError):
    operation = "open request"


class HeaderError(WininetError):
    operation = "add headers"


class SendError(WininetError):
    operation = "send request"


class ProtocolError(WininetError):
    operation = "parse response"


class QueryInfoError(WininetError):
    operation = "query info"


class ReadError(WininetError):
    operation = "read response"
