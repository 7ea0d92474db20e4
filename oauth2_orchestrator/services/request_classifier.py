"""Classify outgoing requests by purpose and subject."""

from __future__ import annotations

from enum import Enum
from typing import Any

from oauth2_orchestrator.exceptions import InvalidRequestKind
from oauth2_orchestrator.schemas import (
    AuthorizationCodeTokenRequest,
    ClientCredentialsTokenRequest,
    ClientRequest,
    RefreshTokenRequest,
    RequestKind,
    UserCredentialsTokenRequest,
    UserRequest,
)


class RequestCategory(str, Enum):
    TOKEN_ACQUISITION = "token_acquisition"
    CLIENT_RESOURCE = "client_resource"
    USER_RESOURCE = "user_resource"


# Each tag is only valid on the variant that declares it.
_VARIANTS = {
    RequestKind.CLIENT_CREDENTIALS_TOKEN: (
        ClientCredentialsTokenRequest,
        RequestCategory.TOKEN_ACQUISITION,
    ),
    RequestKind.AUTHORIZATION_CODE_TOKEN: (
        AuthorizationCodeTokenRequest,
        RequestCategory.TOKEN_ACQUISITION,
    ),
    RequestKind.REFRESH_TOKEN: (RefreshTokenRequest, RequestCategory.TOKEN_ACQUISITION),
    RequestKind.USER_CREDENTIALS_TOKEN: (
        UserCredentialsTokenRequest,
        RequestCategory.TOKEN_ACQUISITION,
    ),
    RequestKind.CLIENT: (ClientRequest, RequestCategory.CLIENT_RESOURCE),
    RequestKind.USER: (UserRequest, RequestCategory.USER_RESOURCE),
}


def classify_request(request: Any) -> RequestCategory:
    """Return the category of a request from its ``kind`` tag and variant."""
    kind = getattr(request, "kind", None)
    try:
        variant, category = _VARIANTS[RequestKind(kind)]
    except (KeyError, ValueError) as exc:
        raise InvalidRequestKind(kind) from exc
    if not isinstance(request, variant):
        raise InvalidRequestKind(kind)
    return category


__all__ = ["RequestCategory", "classify_request"]
