"""
httpx-backed transport used by the OAuth2 client.

The transport only moves bytes: it knows nothing about tokens or retries and
reports error statuses as ``BadResponse``.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, NamedTuple, Optional, Protocol

import httpx

from oauth2_orchestrator.exceptions import BadResponse


class TransportResponse(NamedTuple):
    status_code: int
    headers: Dict[str, str]
    body: bytes


class Transport(Protocol):
    async def send_request(
        self,
        method: str,
        uri: str,
        headers: Mapping[str, str],
        body: Any,
        options: Mapping[str, Any],
    ) -> TransportResponse:
        ...


class HttpxTransport:
    """Send requests relative to an API base URL with ``httpx.AsyncClient``."""

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._base_url = base_url
        self._timeout = timeout
        self._transport = transport

    @property
    def base_url(self) -> str:
        return self._base_url

    async def send_request(
        self,
        method: str,
        uri: str,
        headers: Mapping[str, str],
        body: Any,
        options: Mapping[str, Any],
    ) -> TransportResponse:
        """Send one request; raise ``BadResponse`` for 4xx/5xx answers."""
        kwargs: Dict[str, Any] = dict(options)
        if isinstance(body, Mapping):
            kwargs["data"] = dict(body)
        elif isinstance(body, str):
            kwargs["content"] = body.encode("utf-8")
        elif body is not None:
            kwargs["content"] = body

        async with httpx.AsyncClient(
            base_url=self._base_url,
            timeout=self._timeout,
            transport=self._transport,
        ) as client:
            response = await client.request(method, uri, headers=dict(headers), **kwargs)

        response_headers = dict(response.headers)
        if response.status_code >= 400:
            raise BadResponse(
                response.status_code,
                response.content,
                headers=response_headers,
                method=method,
                uri=uri,
            )

        return TransportResponse(response.status_code, response_headers, response.content)


__all__ = ["HttpxTransport", "Transport", "TransportResponse"]
