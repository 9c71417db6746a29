"""
HTTP transport shared by all resolvers.

Wraps one httpx.AsyncClient with a per-call timeout. Transport failures and
timeouts become NetworkError; status handling is left to the callers except
for the generic non-2xx check in json_body.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import httpx

from degiro_core.errors import ApiError, MalformedResponse, NetworkError

logger = logging.getLogger(__name__)

SESSION_COOKIE = "JSESSIONID"


class HttpClient:
    """
    Thin async HTTP layer. Pass an existing httpx.AsyncClient (e.g. with a
    MockTransport in tests) or let this class create and own one.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = httpx.Timeout(timeout)
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=self.timeout)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def request(
        self,
        method: str,
        url: str,
        *,
        params: Mapping[str, Any] | None = None,
        json: Any = None,
        session_cookie: str | None = None,
    ) -> httpx.Response:
        """Send one request. Raises NetworkError on timeout or transport failure."""
        headers = {"Accept": "application/json"}
        if session_cookie is not None:
            headers["Cookie"] = f"{SESSION_COOKIE}={session_cookie}"
        logger.debug("%s %s", method, _redact(url))
        try:
            response = await self._client.request(
                method,
                url,
                params=params,
                json=json,
                headers=headers,
                timeout=self.timeout,
            )
        except httpx.TimeoutException as e:
            logger.warning("Timeout on %s %s", method, _redact(url))
            raise NetworkError(_redact(url), e) from e
        except httpx.TransportError as e:
            logger.warning("Transport error on %s %s: %s", method, _redact(url), e)
            raise NetworkError(_redact(url), e) from e
        logger.debug("%s %s -> %s", method, _redact(url), response.status_code)
        return response


def json_body(response: httpx.Response) -> Any:
    """
    Decode a success response body as JSON.

    Raises ApiError for a non-2xx status and MalformedResponse for a body that
    is not JSON.
    """
    url = _redact(str(response.request.url))
    if not response.is_success:
        raise ApiError(url, response.status_code)
    try:
        return response.json()
    except ValueError as e:
        raise MalformedResponse(f"Response from {url} is not JSON: {e!s}") from e


def data_object(payload: Any, source: str, error_cls: type[MalformedResponse] = MalformedResponse) -> dict:
    """Return payload["data"] as a dict or raise error_cls."""
    if not isinstance(payload, dict) or not isinstance(payload.get("data"), dict):
        raise error_cls(f"{source}: response has no 'data' object", field="data")
    return payload["data"]


def _redact(url: str) -> str:
    """Strip session ids from a URL for logging."""
    if ";jsessionid=" in url:
        head, _, tail = url.partition(";jsessionid=")
        _, sep, rest = tail.partition("?")
        url = f"{head};jsessionid=***{sep}{rest}"
    if "sessionId=" in url:
        parts = []
        for part in url.split("&"):
            key, eq, _ = part.partition("sessionId=")
            parts.append(f"{key}sessionId=***" if eq else part)
        url = "&".join(parts)
    return url
