import os
from dataclasses import dataclass

SENTINEL_COOKIE_HEADER = "Cookie: ignore=ignore"


@dataclass
class Settings:
    # the native engine drops the first add-if-new cookie header it is given
    sentinel_cookie: bool = True
    sentinel_cookie_header: str = SENTINEL_COOKIE_HEADER
    initial_buffer_size: int = 0
    header_encoding: str = "iso-8859-1"

    @staticmethod
    def from_env() -> "Settings":
        sentinel = os.environ.get("WININET_SENTINEL_COOKIE", "1")
        return Settings(
            sentinel_cookie=sentinel.lower() not in ("0", "false", "no", "off"),
            header_encoding=os.environ.get("WININET_HEADER_ENCODING", "iso-8859-1"),
        )
