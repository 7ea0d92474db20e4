"""Request descriptions accepted by the OAuth2 client.

Every request carries an explicit ``kind`` tag. Token requests obtain tokens
from the authorization server; resource requests call the protected API on
behalf of the client application or of a given end user.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RequestKind(str, Enum):
    """Closed set of request variants."""

    CLIENT_CREDENTIALS_TOKEN = "client_credentials_token"
    AUTHORIZATION_CODE_TOKEN = "authorization_code_token"
    REFRESH_TOKEN = "refresh_token"
    USER_CREDENTIALS_TOKEN = "user_credentials_token"
    CLIENT = "client"
    USER = "user"


class ApiRequest(BaseModel):
    """Fields shared by every request variant."""

    model_config = ConfigDict(frozen=True)

    kind: RequestKind
    method: str = "GET"
    uri: str = ""
    headers: Dict[str, str] = Field(default_factory=dict)
    body: Any = None
    options: Dict[str, Any] = Field(
        default_factory=dict,
        description="Extra keyword arguments forwarded to the transport.",
    )
    deserialization_target: Optional[Any] = Field(
        None,
        description="Type the response body is decoded into; generic mapping when omitted.",
    )

    @field_validator("method")
    @classmethod
    def _normalize_method(cls, value: str) -> str:
        return value.upper()

    def with_uri(self, uri: str) -> "ApiRequest":
        return self.model_copy(update={"uri": uri})


class TokenRequest(ApiRequest, ABC):
    """Base for requests sent to the token endpoint."""

    method: str = "POST"
    user_id: Optional[int] = Field(
        None, description="End user the issued token belongs to, if any."
    )

    @abstractmethod
    def grant_parameters(self) -> Dict[str, str]:
        """Form parameters identifying the grant."""


class ClientCredentialsTokenRequest(TokenRequest):
    kind: Literal[RequestKind.CLIENT_CREDENTIALS_TOKEN] = RequestKind.CLIENT_CREDENTIALS_TOKEN
    scope: Optional[str] = None

    def grant_parameters(self) -> Dict[str, str]:
        params = {"grant_type": "client_credentials"}
        if self.scope:
            params["scope"] = self.scope
        return params


class AuthorizationCodeTokenRequest(TokenRequest):
    """Exchange an authorization code obtained out of band for a user token."""

    kind: Literal[RequestKind.AUTHORIZATION_CODE_TOKEN] = RequestKind.AUTHORIZATION_CODE_TOKEN
    code: str
    redirect_uri: Optional[str] = None

    def grant_parameters(self) -> Dict[str, str]:
        params = {"grant_type": "authorization_code", "code": self.code}
        if self.redirect_uri is not None:
            params["redirect_uri"] = self.redirect_uri
        return params


class RefreshTokenRequest(TokenRequest):
    kind: Literal[RequestKind.REFRESH_TOKEN] = RequestKind.REFRESH_TOKEN
    refresh_token: str = Field(..., repr=False)

    def grant_parameters(self) -> Dict[str, str]:
        return {"grant_type": "refresh_token", "refresh_token": self.refresh_token}


class UserCredentialsTokenRequest(TokenRequest):
    """Resource owner password grant."""

    kind: Literal[RequestKind.USER_CREDENTIALS_TOKEN] = RequestKind.USER_CREDENTIALS_TOKEN
    username: str
    password: str = Field(..., repr=False)
    scope: Optional[str] = None

    def grant_parameters(self) -> Dict[str, str]:
        params = {
            "grant_type": "password",
            "username": self.username,
            "password": self.password,
        }
        if self.scope:
            params["scope"] = self.scope
        return params


class ClientRequest(ApiRequest):
    """API call made on behalf of the client application."""

    kind: Literal[RequestKind.CLIENT] = RequestKind.CLIENT


class UserRequest(ApiRequest):
    """API call made on behalf of a specific end user."""

    kind: Literal[RequestKind.USER] = RequestKind.USER
    user_id: int


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
