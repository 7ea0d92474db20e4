"""Public schema exports."""

from .requests import (
    ApiRequest,
    AuthorizationCodeTokenRequest,
    ClientCredentialsTokenRequest,
    ClientRequest,
    RefreshTokenRequest,
    RequestKind,
    TokenRequest,
    UserCredentialsTokenRequest,
    UserRequest,
)

__all__ = [
    "ApiRequest",
    "AuthorizationCodeTokenRequest",
    "ClientCredentialsTokenRequest",
    "ClientRequest",
    "RefreshTokenRequest",
    "RequestKind",
    "TokenRequest",
    "UserCredentialsTokenRequest",
    "UserRequest",
]
