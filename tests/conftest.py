from __future__ import annotations

import pytest

from oauth_helper.clients import AuthClient, TransportError

CLIENT_ID = "fakeClientID"
CLIENT_SECRET = "fakeClientSecret"
REDIRECT_URL = "fakeRedirectURL"


class EchoTransport:
    """POST answers with "<url> <body>"; GET answers with nothing."""

    def __init__(self) -> None:
        self.content_types: list[str] = []

    async def get(self, url: str) -> bytes:
        return b""

    async def post(self, url: str, body: str, *, content_type: str) -> bytes:
        self.content_types.append(content_type)
        return f"{url} {body}".encode()


class StubTransport:
    """Canned responses for the token and tokeninfo endpoints."""

    def __init__(self, *, token_body: bytes = b"", tokeninfo_body: bytes = b"", fail_on: str | None = None) -> None:
        self.token_body = token_body
        self.tokeninfo_body = tokeninfo_body
        self.fail_on = fail_on
        self.requested: list[tuple[str, str]] = []

    async def get(self, url: str) -> bytes:
        self.requested.append(("GET", url))
        if self.fail_on == "GET":
            raise TransportError("Request failed", status_code=400, error="invalid_token")
        return self.tokeninfo_body

    async def post(self, url: str, body: str, *, content_type: str) -> bytes:
        self.requested.append(("POST", url))
        if self.fail_on == "POST":
            raise TransportError("Network error", error="network_error")
        return self.token_body


@pytest.fixture
def echo_client() -> AuthClient:
    return AuthClient(CLIENT_ID, CLIENT_SECRET, REDIRECT_URL, transport=EchoTransport())


def make_client(transport) -> AuthClient:
    return AuthClient(CLIENT_ID, CLIENT_SECRET, REDIRECT_URL, transport=transport)
