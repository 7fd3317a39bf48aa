from __future__ import annotations

import logging
from typing import Any, Dict, Mapping
from urllib.parse import urlsplit, urlunsplit

import httpx

from oauth_helper.clients.errors import TransportError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 2.0


class HttpxTransport:
    """Default transport: one short-lived ``httpx.AsyncClient`` per request.

    Network failures and HTTP error statuses are raised as ``TransportError``;
    anything else returns the raw response body.
    """

    def __init__(self, timeout: float = DEFAULT_TIMEOUT) -> None:
        self._timeout = timeout

    async def get(self, url: str) -> bytes:
        return await self._send("GET", url)

    async def post(self, url: str, body: str, *, content_type: str) -> bytes:
        return await self._send("POST", url, content=body, headers={"Content-Type": content_type})

    async def _send(self, method: str, url: str, **kwargs: Any) -> bytes:
        endpoint = _strip_query(url)
        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                resp = await client.request(method, url, **kwargs)
        except httpx.HTTPError as exc:
            raise TransportError(
                f"Network error calling {endpoint}",
                error="network_error",
                description=str(exc),
            ) from exc

        logger.debug(
            "provider response",
            extra={"method": method, "endpoint": endpoint, "status_code": resp.status_code},
        )

        if resp.status_code >= 400:
            payload = _safe_json(resp)
            raise TransportError(
                f"Request to {endpoint} failed",
                error=_error_code(payload),
                description=_error_description(payload, resp.text),
                status_code=resp.status_code,
                details=payload,
            )

        return resp.content


def _strip_query(url: str) -> str:
    # Tokens and secrets travel in the query string; keep them out of logs and messages.
    parts = urlsplit(url)
    return urlunsplit(parts._replace(query="", fragment=""))


def _safe_json(resp: httpx.Response) -> Dict[str, Any]:
    try:
        data = resp.json()
    except ValueError:
        return {"raw": resp.text}
    if not isinstance(data, dict):
        return {"raw": resp.text}
    return data


def _error_code(payload: Mapping[str, Any]) -> str | None:
    for key in ("error", "error_code", "code"):
        value = payload.get(key)
        if isinstance(value, str):
            return value
    return None


def _error_description(payload: Mapping[str, Any], default: str) -> str:
    for key in ("error_description", "message", "error_message"):
        value = payload.get(key)
        if isinstance(value, str) and value.strip():
            return value
    return default
