from oauth_helper.clients.auth import AuthClient
from oauth_helper.clients.errors import (
    AudienceMismatchError,
    AuthClientError,
    ConfigError,
    EmptyResponseError,
    ScopeMismatchError,
    TransportError,
    VerificationError,
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

__all__ = [
    "AudienceMismatchError",
    "AuthClient",
    "AuthClientError",
    "AuthSession",
    "ClientConfig",
    "ConfigError",
    "EmptyResponseError",
    "FailedToken",
    "HttpxTransport",
    "JsonFieldExtractor",
    "ScopeMismatchError",
    "TokenBundle",
    "TokenResult",
    "TransportError",
    "VerificationError",
    "VerifiedToken",
]
