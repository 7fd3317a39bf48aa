from __future__ import annotations

from typing import Any, Mapping


class AuthClientError(Exception):
    def __init__(
        self,
        message: str,
        *,
        error: str | None = None,
        description: str | None = None,
        status_code: int | None = None,
        details: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.error = error
        self.description = description
        self.status_code = status_code
        self.details = dict(details or {})


class ConfigError(AuthClientError):
    """Raised when a required client setting is missing."""


class TransportError(AuthClientError):
    """Raised when the provider could not be reached or answered with an error status."""


class VerificationError(AuthClientError):
    """Raised when an access token does not belong to this client's request."""


class EmptyResponseError(VerificationError):
    pass


class AudienceMismatchError(VerificationError):
    pass


class ScopeMismatchError(VerificationError):
    pass
