from __future__ import annotations

from typing import Protocol


class HttpTransport(Protocol):
    async def get(self, url: str) -> bytes:
        ...

    async def post(self, url: str, body: str, *, content_type: str) -> bytes:
        ...


class FieldExtractor(Protocol):
    def get(self, body: bytes, path: str) -> str:
        ...
