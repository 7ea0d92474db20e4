"""
Domain model for issued OAuth2 tokens.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field


class Token(BaseModel):
    """An access token issued by the authorization server.

    Tokens are immutable. A token carrying ``owner_user_id`` belongs to an end
    user; a token without one belongs to the client application itself.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    access_token: str = Field(..., min_length=1)
    token_type: str = Field("Bearer", description="Authorization scheme, usually Bearer.")
    refresh_token: Optional[str] = None
    scope: Optional[str] = None
    expires_in: Optional[int] = Field(None, description="Lifetime in seconds at issuance.")
    owner_user_id: Optional[int] = Field(
        None, description="End user the token was issued for, if any."
    )

    @classmethod
    def from_response(cls, data: Mapping[str, Any]) -> "Token":
        """Build a token from a raw token-endpoint payload."""
        return cls.model_validate(dict(data))

    @property
    def is_user_token(self) -> bool:
        return self.owner_user_id is not None

    def for_user(self, user_id: int) -> "Token":
        """Return a copy of the token stamped with its owning user."""
        if self.owner_user_id == user_id:
            return self
        return self.model_copy(update={"owner_user_id": user_id})


__all__ = ["Token"]
