"""
Google OAuth 2.0 authorization-code helper.
"""
from oauth_helper.clients import (
    AudienceMismatchError,
    AuthClient,
    AuthClientError,
    AuthSession,
    ConfigError,
    EmptyResponseError,
    FailedToken,
    ScopeMismatchError,
    TokenBundle,
    TokenResult,
    TransportError,
    VerificationError,
    VerifiedToken,
)
from oauth_helper.logging_config import configure_logging, configure_logging_from_settings

__all__ = [
    "AudienceMismatchError",
    "AuthClient",
    "AuthClientError",
    "AuthSession",
    "ConfigError",
    "EmptyResponseError",
    "FailedToken",
    "ScopeMismatchError",
    "TokenBundle",
    "TokenResult",
    "TransportError",
    "VerificationError",
    "VerifiedToken",
    "configure_logging",
    "configure_logging_from_settings",
]
