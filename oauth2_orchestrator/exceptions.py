"""
Exception hierarchy for the OAuth2 token orchestration layer.

Only an expired or invalid bearer token (HTTP 401 on a resource call) is
handled locally; every other error defined here reaches the caller.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional


class OAuth2ClientError(Exception):
    """Base exception for all errors raised by the orchestration layer."""


class InvalidRequestKind(OAuth2ClientError, TypeError):
    """Raised when a request is neither a token request nor a resource request."""

    def __init__(self, kind: Any) -> None:
        super().__init__(
            f"Unsupported request kind {kind!r}: requests must be token or resource requests."
        )
        self.kind = kind


class UserAuthenticationRequired(OAuth2ClientError):
    """Raised when no usable token exists for a user and none can be issued automatically."""

    def __init__(self, user_id: int, message: Optional[str] = None) -> None:
        super().__init__(
            message or f"User {user_id} must authenticate before calling the API."
        )
        self.user_id = user_id


class RequestMaxTryExceeded(OAuth2ClientError):
    """Raised when a resource call is still unauthorized after a token renewal."""

    def __init__(self, last_error: "BadResponse", max_try: int) -> None:
        super().__init__(
            f"Maximum request try reached ({max_try} retry after token renewal): {last_error}"
        )
        self.last_error = last_error
        self.max_try = max_try


class BadResponse(OAuth2ClientError):
    """Raised by the transport when the server answers with an error status."""

    def __init__(
        self,
        status_code: int,
        body: bytes = b"",
        *,
        headers: Optional[Mapping[str, str]] = None,
        method: Optional[str] = None,
        uri: Optional[str] = None,
    ) -> None:
        target = f" for {method} {uri}" if method and uri else ""
        super().__init__(f"Server responded with status {status_code}{target}.")
        self.status_code = status_code
        self.body = body
        self.headers = dict(headers or {})
        self.method = method
        self.uri = uri

    @property
    def is_client_error(self) -> bool:
        return 400 <= self.status_code < 500

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")


class ResponseDecodeError(OAuth2ClientError, ValueError):
    """Raised when a response body cannot be decoded into the requested target."""


class UnsupportedFormatError(ResponseDecodeError):
    """Raised when a wire format has no decoder."""


__all__ = [
    "BadResponse",
    "InvalidRequestKind",
    "OAuth2ClientError",
    "RequestMaxTryExceeded",
    "ResponseDecodeError",
    "UnsupportedFormatError",
    "UserAuthenticationRequired",
]
