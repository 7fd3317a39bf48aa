from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Union

from oauth_helper.clients.errors import AuthClientError, ConfigError


@dataclass(frozen=True)
class ClientConfig:
    client_id: str
    client_secret: str = field(repr=False)
    redirect_url: str

    def __post_init__(self) -> None:
        if not self.client_id:
            raise ConfigError("oauth2: Please enter your clientID for Google OAuth", error="configuration_error")
        if not self.client_secret:
            raise ConfigError("oauth2: Please enter your clientSecret for Google OAuth", error="configuration_error")
        if not self.redirect_url:
            raise ConfigError("oauth2: Please enter a redirect URL for Google Auth", error="configuration_error")


@dataclass(frozen=True)
class AuthSession:
    """One authorization attempt: the URL to send the user to and what it asked for.

    Keep it until the callback arrives and hand it to ``verify_token`` so the
    granted scope can be checked against the requested one.
    """

    url: str
    scope: str
    state: str = ""

    def __str__(self) -> str:
        return self.url


@dataclass(frozen=True)
class TokenBundle:
    access_token: str = ""
    token_type: str = ""
    expires_in: str = ""
    refresh_token: str = ""
    id_token: str = ""


@dataclass(frozen=True)
class VerifiedToken:
    tokens: TokenBundle
    subject: str
    verified: Literal[True] = field(default=True, init=False)

    @property
    def access_token(self) -> str:
        return self.tokens.access_token

    @property
    def token_type(self) -> str:
        return self.tokens.token_type

    @property
    def expires_in(self) -> str:
        return self.tokens.expires_in

    @property
    def refresh_token(self) -> str:
        return self.tokens.refresh_token

    @property
    def id_token(self) -> str:
        return self.tokens.id_token


@dataclass(frozen=True)
class FailedToken:
    error: AuthClientError
    verified: Literal[False] = field(default=False, init=False)

    # A failed exchange never exposes partial token data.
    access_token: str = field(default="", init=False)
    token_type: str = field(default="", init=False)
    expires_in: str = field(default="", init=False)
    refresh_token: str = field(default="", init=False)
    id_token: str = field(default="", init=False)
    subject: str = field(default="", init=False)


TokenResult = Union[VerifiedToken, FailedToken]
