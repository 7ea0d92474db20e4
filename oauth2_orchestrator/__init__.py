"""OAuth2 client-side token orchestration."""

from oauth2_orchestrator.clients import HttpxTransport, InMemoryTokenManager, PydanticSerializer
from oauth2_orchestrator.core.config import OAuth2ClientSettings
from oauth2_orchestrator.exceptions import (
    BadResponse,
    InvalidRequestKind,
    OAuth2ClientError,
    RequestMaxTryExceeded,
    ResponseDecodeError,
    UserAuthenticationRequired,
)
from oauth2_orchestrator.models.token import Token
from oauth2_orchestrator.schemas import (
    AuthorizationCodeTokenRequest,
    ClientCredentialsTokenRequest,
    ClientRequest,
    RefreshTokenRequest,
    UserCredentialsTokenRequest,
    UserRequest,
)
from oauth2_orchestrator.services import OAuth2Client, TokenCache

__all__ = [
    "AuthorizationCodeTokenRequest",
    "BadResponse",
    "ClientCredentialsTokenRequest",
    "ClientRequest",
    "HttpxTransport",
    "InMemoryTokenManager",
    "InvalidRequestKind",
    "OAuth2Client",
    "OAuth2ClientError",
    "OAuth2ClientSettings",
    "PydanticSerializer",
    "RefreshTokenRequest",
    "RequestMaxTryExceeded",
    "ResponseDecodeError",
    "Token",
    "TokenCache",
    "UserAuthenticationRequired",
    "UserCredentialsTokenRequest",
    "UserRequest",
]
