from __future__ import annotations

import logging
from typing import Optional
from urllib.parse import quote, urlencode

from oauth_helper.clients.errors import (
    AudienceMismatchError,
    AuthClientError,
    EmptyResponseError,
    ScopeMismatchError,
)
from oauth_helper.clients.json_fields import JsonFieldExtractor
from oauth_helper.clients.models import (
    AuthSession,
    ClientConfig,
    FailedToken,
    TokenBundle,
    TokenResult,
    VerifiedToken,
)
from oauth_helper.clients.transport import HttpxTransport
from oauth_helper.clients.types import FieldExtractor, HttpTransport
from oauth_helper.settings import Settings, get_settings

logger = logging.getLogger(__name__)

# https://developers.google.com/identity/protocols/OAuth2WebServer
AUTHORIZATION_URL = "https://accounts.google.com/o/oauth2/v2/auth"
TOKEN_URL = "https://www.googleapis.com/oauth2/v4/token"
TOKENINFO_URL = "https://www.googleapis.com/oauth2/v3/tokeninfo"

SCOPE_EMAIL = "email"
SCOPE_PROFILE = "profile"
SCOPE_USERINFO_EMAIL = "https://www.googleapis.com/auth/userinfo.email"
SCOPE_USERINFO_PROFILE = "https://www.googleapis.com/auth/userinfo.profile"
DEFAULT_SCOPE = " ".join((SCOPE_EMAIL, SCOPE_PROFILE, SCOPE_USERINFO_EMAIL, SCOPE_USERINFO_PROFILE))

ACCESS_TYPE_ONLINE = "online"
ACCESS_TYPE_OFFLINE = "offline"

PROMPT_CONSENT = "consent"
PROMPT_SELECT_ACCOUNT = "select_account"
DEFAULT_PROMPT = f"{PROMPT_CONSENT} {PROMPT_SELECT_ACCOUNT}"

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


class AuthClient:
    """Authorization-code flow against Google's OAuth 2.0 endpoints.

    The client only holds its configuration. Everything tied to a single
    login attempt lives in the ``AuthSession`` returned by ``get_auth_url``,
    so one instance can serve many concurrent logins.
    """

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        redirect_url: str,
        *,
        transport: Optional[HttpTransport] = None,
        extractor: Optional[FieldExtractor] = None,
    ) -> None:
        self._config = ClientConfig(client_id=client_id, client_secret=client_secret, redirect_url=redirect_url)
        self._transport: HttpTransport = transport or HttpxTransport()
        self._fields: FieldExtractor = extractor or JsonFieldExtractor()

    @classmethod
    def from_settings(
        cls,
        settings: Optional[Settings] = None,
        *,
        transport: Optional[HttpTransport] = None,
        extractor: Optional[FieldExtractor] = None,
    ) -> AuthClient:
        s = settings or get_settings()
        return cls(
            s.oauth.client_id,
            s.oauth.client_secret,
            s.oauth.redirect_url,
            transport=transport or HttpxTransport(timeout=s.oauth.timeout),
            extractor=extractor,
        )

    @property
    def config(self) -> ClientConfig:
        return self._config

    def get_auth_url(
        self,
        scope: str = "",
        access_type: str = "",
        state: str = "",
        include_granted_scopes: str = "",
        login_hint: str = "",
        prompt: str = "",
    ) -> AuthSession:
        """Build the URL that sends the user to Google's consent screen.

        Empty ``scope`` and ``prompt`` fall back to the defaults,
        ``access_type`` is ``offline`` unless ``online`` is asked for, and
        ``include_granted_scopes`` is always ``true``.
        """
        if not scope:
            scope = DEFAULT_SCOPE

        if include_granted_scopes != "true":
            include_granted_scopes = "true"

        if access_type != ACCESS_TYPE_ONLINE:
            access_type = ACCESS_TYPE_OFFLINE

        if not prompt:
            prompt = DEFAULT_PROMPT

        params = [
            ("scope", scope),
            ("access_type", access_type),
            ("include_granted_scopes", include_granted_scopes),
            ("state", state),
            ("redirect_uri", self._config.redirect_url),
            ("response_type", "code"),
            ("login_hint", login_hint),
            ("prompt", prompt),
            ("client_id", self._config.client_id),
        ]
        url = f"{AUTHORIZATION_URL}?{urlencode(params, quote_via=quote)}"
        return AuthSession(url=url, scope=scope, state=state)

    async def get_token(self, code: str) -> bytes:
        """Exchange an authorization code at the token endpoint; returns the raw body."""
        data = {
            "code": code,
            "client_id": self._config.client_id,
            "client_secret": self._config.client_secret,
            "redirect_uri": self._config.redirect_url,
            "grant_type": "authorization_code",
        }
        body = urlencode(sorted(data.items()))
        response = await self._transport.post(TOKEN_URL, body, content_type=FORM_CONTENT_TYPE)
        logger.debug("authorization code exchanged", extra={"endpoint": TOKEN_URL})
        return response

    async def verify_token(self, access_token: str, session: Optional[AuthSession] = None) -> str:
        """Check an access token with the tokeninfo endpoint and return its user id.

        The token must have been issued to this client (``aud``) for exactly
        the scope ``session`` requested. Without a session the expected
        scope is empty.
        """
        url = f"{TOKENINFO_URL}?{urlencode({'access_token': access_token})}"
        body = await self._transport.get(url)
        if not body:
            raise EmptyResponseError("Could not find details for that access token", error="empty_response")

        aud = self._fields.get(body, "aud")
        scope = self._fields.get(body, "scope")
        user_id = self._fields.get(body, "userid")

        if aud != self._config.client_id:
            raise AudienceMismatchError(
                "Aud and clientID do not match",
                error="invalid_audience",
                details={"aud": aud},
            )

        expected_scope = session.scope if session else ""
        if scope != expected_scope:
            raise ScopeMismatchError(
                "Scope does not match original scope",
                error="invalid_scope",
                details={"scope": scope, "expected": expected_scope},
            )

        return user_id

    async def get_and_verify_token(self, code: str, session: Optional[AuthSession] = None) -> TokenResult:
        """Exchange ``code`` and verify the resulting access token.

        Client errors are returned as a ``FailedToken`` rather than raised.
        """
        try:
            body = await self.get_token(code)
        except AuthClientError as exc:
            return FailedToken(error=exc)

        tokens = TokenBundle(
            access_token=self._fields.get(body, "access_token"),
            token_type=self._fields.get(body, "token_type"),
            expires_in=self._fields.get(body, "expires_in"),
            refresh_token=self._fields.get(body, "refresh_token"),
            id_token=self._fields.get(body, "id_token"),
        )

        try:
            subject = await self.verify_token(tokens.access_token, session)
        except AuthClientError as exc:
            return FailedToken(error=exc)

        logger.debug("access token verified", extra={"endpoint": TOKENINFO_URL})
        return VerifiedToken(tokens=tokens, subject=subject)
