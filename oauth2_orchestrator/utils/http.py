"""HTTP header helpers for client (Basic) and bearer authorization."""

from __future__ import annotations

import base64
from typing import Dict, Mapping
from urllib.parse import quote

AUTHORIZATION_HEADER = "Authorization"


def basic_auth_header(client_id: str, client_secret: str) -> str:
    """Build an HTTP Basic value for authenticating the client at the token endpoint."""
    # RFC 6749 section 2.3.1: credentials are form-urlencoded before base64.
    credentials = f"{quote(client_id, safe='')}:{quote(client_secret, safe='')}"
    encoded = base64.b64encode(credentials.encode("utf-8")).decode("ascii")
    return f"Basic {encoded}"


def bearer_auth_header(access_token: str) -> str:
    return f"Bearer {access_token}"


def without_authorization(headers: Mapping[str, str] | None) -> Dict[str, str]:
    """Copy headers, dropping any Authorization entry regardless of case."""
    return {
        key: value
        for key, value in (headers or {}).items()
        if key.lower() != AUTHORIZATION_HEADER.lower()
    }


def with_authorization(headers: Mapping[str, str] | None, value: str) -> Dict[str, str]:
    merged = without_authorization(headers)
    merged[AUTHORIZATION_HEADER] = value
    return merged


__all__ = [
    "AUTHORIZATION_HEADER",
    "basic_auth_header",
    "bearer_auth_header",
    "with_authorization",
    "without_authorization",
]
