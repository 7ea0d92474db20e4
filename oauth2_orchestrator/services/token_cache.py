"""
In-memory token cache backed by a token manager.
"""

from __future__ import annotations

import asyncio
from typing import Dict, Optional

from oauth2_orchestrator.clients.token_manager import TokenManager
from oauth2_orchestrator.models.token import Token


class TokenCache:
    """Hold the current client token and per-user tokens for one named client.

    Entries are loaded lazily from the token manager on first lookup and
    replaced on every issuance. Nothing expires on its own: a stale token is
    only discovered when the API rejects it.
    Entries and their per-subject locks live as long as the cache; locks are
    kept after ``invalidate`` so a waiting caller never loses its lock.
    """

    def __init__(self, client_name: str, token_manager: TokenManager) -> None:
        self._client_name = client_name
        self._manager = token_manager
        self._client_token: Optional[Token] = None
        self._user_tokens: Dict[int, Token] = {}
        self._locks: Dict[Optional[int], asyncio.Lock] = {}

    @property
    def client_name(self) -> str:
        return self._client_name

    def get_client_token(self) -> Optional[Token]:
        if self._client_token is None:
            self._client_token = self._manager.load_client_token(self._client_name)
        return self._client_token

    def get_user_token(self, user_id: int) -> Optional[Token]:
        token = self._user_tokens.get(user_id)
        if token is None:
            token = self._manager.load_user_token(self._client_name, user_id)
            if token is not None:
                self._user_tokens[user_id] = token
        return token

    def put(self, token: Token) -> None:
        """Store a token under its owner and write it through to persistence."""
        if token.owner_user_id is not None:
            self._user_tokens[token.owner_user_id] = token
        else:
            self._client_token = token
        self._manager.save_token(self._client_name, token)

    def peek(self, user_id: Optional[int] = None) -> Optional[Token]:
        """Return the in-memory token for a subject without touching persistence."""
        if user_id is None:
            return self._client_token
        return self._user_tokens.get(user_id)

    def invalidate(self, user_id: Optional[int] = None) -> None:
        if user_id is None:
            self._client_token = None
        else:
            self._user_tokens.pop(user_id, None)

    def lock(self, user_id: Optional[int] = None) -> asyncio.Lock:
        """Return the lock guarding the token of a subject (``None`` is the client)."""
        lock = self._locks.get(user_id)
        if lock is None:
            lock = self._locks[user_id] = asyncio.Lock()
        return lock


__all__ = ["TokenCache"]
