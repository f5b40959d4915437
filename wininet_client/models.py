import io
import json
import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, BinaryIO

from .headers import Headers


@dataclass(frozen=True)
class Cookie:
    name: str
    value: str

    def __str__(self) -> str:
        return f"{self.name}={self.value}"


@dataclass
class Request:
    method: str
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    cookies: list[Cookie] = field(default_factory=list)
    body: bytes = b""

    def add_cookie(self, cookie: Cookie) -> None:
        self.cookies.append(cookie)

    def __str__(self) -> str:
        return f"{self.method} {self.url}"


@dataclass
class Response:
    status_code: int
    status: str
    proto: str = ""
    proto_major: int = 0
    proto_minor: int = 0
    headers: Headers = field(default_factory=Headers)
    cookies: list[Cookie] = field(default_factory=list)
    body: BinaryIO = field(default_factory=io.BytesIO)
    content_length: int = 0

    def add_cookie(self, cookie: Cookie) -> None:
        self.cookies.append(cookie)

    def read(self) -> bytes:
        return self.body.read()

    def json(self) -> Any:
        return json.load(self.body)

    def save(self, path: str | Path) -> None:
        with Path(path).open("wb") as f:
            shutil.copyfileobj(self.body, f)

    def __str__(self) -> str:
        return f"{self.proto} {self.status}".strip()
