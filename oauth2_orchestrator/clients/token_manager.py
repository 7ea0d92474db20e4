"""Token persistence contract and an in-memory implementation."""

from __future__ import annotations

from typing import Dict, Optional, Protocol, Tuple, runtime_checkable

from oauth2_orchestrator.models.token import Token


@runtime_checkable
class TokenManager(Protocol):
    """Loads and saves tokens keyed by client name and, for user tokens, user id."""

    def load_client_token(self, client_name: str) -> Optional[Token]:
        ...

    def load_user_token(self, client_name: str, user_id: int) -> Optional[Token]:
        ...

    def save_token(self, client_name: str, token: Token) -> None:
        ...


class InMemoryTokenManager:
    """Process-local token storage keyed by (client name, user id)."""

    def __init__(self) -> None:
        self._tokens: Dict[Tuple[str, Optional[int]], Token] = {}

    def load_client_token(self, client_name: str) -> Optional[Token]:
        return self._tokens.get((client_name, None))

    def load_user_token(self, client_name: str, user_id: int) -> Optional[Token]:
        return self._tokens.get((client_name, user_id))

    def save_token(self, client_name: str, token: Token) -> None:
        self._tokens[(client_name, token.owner_user_id)] = token

    def __len__(self) -> int:
        return len(self._tokens)


__all__ = ["InMemoryTokenManager", "TokenManager"]
