"""
Token orchestration for outgoing API calls.

Every request sent through :class:`OAuth2Client` is classified, authorized with
the right token (acquiring a client token when none exists yet) and, when the
API answers 401, replayed once after the token has been refreshed or reissued.
"""

from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Any, Optional

from oauth2_orchestrator.clients.serializer import PydanticSerializer, Serializer
from oauth2_orchestrator.clients.token_manager import TokenManager
from oauth2_orchestrator.clients.transport import HttpxTransport, Transport
from oauth2_orchestrator.core.config import OAuth2ClientSettings
from oauth2_orchestrator.exceptions import (
    BadResponse,
    RequestMaxTryExceeded,
    UserAuthenticationRequired,
)
from oauth2_orchestrator.models.token import Token
from oauth2_orchestrator.schemas import (
    ApiRequest,
    ClientCredentialsTokenRequest,
    RefreshTokenRequest,
    TokenRequest,
)
from oauth2_orchestrator.services.request_classifier import RequestCategory, classify_request
from oauth2_orchestrator.services.token_cache import TokenCache
from oauth2_orchestrator.utils.http import (
    basic_auth_header,
    bearer_auth_header,
    with_authorization,
)

logger = logging.getLogger(__name__)


class OAuth2Client:
    """Send API requests for one named OAuth2 client configuration."""

    REQUEST_MAX_TRY = 1

    def __init__(
        self,
        settings: OAuth2ClientSettings,
        token_manager: TokenManager,
        *,
        transport: Optional[Transport] = None,
        serializer: Optional[Serializer] = None,
        token_cache: Optional[TokenCache] = None,
    ) -> None:
        self._settings = settings
        self._transport = transport or HttpxTransport(
            str(settings.api_base_url), timeout=settings.timeout_seconds
        )
        self._serializer = serializer or PydanticSerializer()
        self._cache = token_cache or TokenCache(settings.name, token_manager)

    @property
    def name(self) -> str:
        return self._settings.name

    @property
    def base_url(self) -> str:
        return str(self._settings.api_base_url)

    @property
    def token_cache(self) -> TokenCache:
        return self._cache

    async def send(self, request: ApiRequest) -> Any:
        """Send a request and return its decoded response body.

        Token requests return the issued :class:`Token` without storing it; use
        :meth:`request_access_token` to also make it the current token.
        """
        return await self._send(request, 0)

    async def request_access_token(self, token_request: TokenRequest) -> Token:
        """Obtain a token from the token endpoint and make it the current one."""
        token = await self._send_token_request(token_request.with_uri(self._settings.token_uri))
        if isinstance(token_request, RefreshTokenRequest) and token.refresh_token is None:
            # Servers may keep the refresh token unchanged and omit it from the answer.
            token = token.model_copy(update={"refresh_token": token_request.refresh_token})
        self._cache.put(token)
        logger.info(
            "Stored %s token for client %s",
            "user" if token.is_user_token else "client",
            self.name,
        )
        return token

    def get_client_token(self) -> Optional[Token]:
        return self._cache.get_client_token()

    def get_user_token(self, user_id: int) -> Optional[Token]:
        return self._cache.get_user_token(user_id)

    async def _send(self, request: ApiRequest, attempt: int) -> Any:
        category = classify_request(request)
        if category is RequestCategory.TOKEN_ACQUISITION:
            return await self._send_token_request(request)  # type: ignore[arg-type]

        token = await self._resolve_token(request, category)
        headers = with_authorization(request.headers, bearer_auth_header(token.access_token))

        try:
            response = await self._transport.send_request(
                request.method, request.uri, headers, request.body, request.options
            )
        except BadResponse as exc:
            if exc.status_code != HTTPStatus.UNAUTHORIZED:
                raise
            if attempt >= self.REQUEST_MAX_TRY:
                logger.warning(
                    "Request %s %s still unauthorized after token renewal",
                    request.method,
                    request.uri,
                )
                raise RequestMaxTryExceeded(exc, self.REQUEST_MAX_TRY) from exc
            # The API rejected the token: assume it expired and renew it.
            await self._refresh_or_reissue(request, category, token)
            return await self._send(request, attempt + 1)

        return self._serializer.decode(
            response.body, request.deserialization_target, self._settings.wire_format
        )

    async def _send_token_request(self, request: TokenRequest) -> Token:
        headers = with_authorization(
            request.headers,
            basic_auth_header(self._settings.client_id, self._settings.client_secret),
        )
        response = await self._transport.send_request(
            request.method,
            request.uri or self._settings.token_uri,
            headers,
            request.grant_parameters(),
            request.options,
        )
        decoded = self._serializer.decode(response.body, Token, self._settings.wire_format)
        token = decoded if isinstance(decoded, Token) else Token.from_response(decoded)
        if request.user_id is not None and token.owner_user_id is None:
            token = token.for_user(request.user_id)
        return token

    async def _resolve_token(self, request: ApiRequest, category: RequestCategory) -> Token:
        if category is RequestCategory.USER_RESOURCE:
            user_id = request.user_id  # type: ignore[attr-defined]
            token = self._cache.get_user_token(user_id)
            if token is None:
                raise UserAuthenticationRequired(user_id)
            return token

        async with self._cache.lock():
            token = self._cache.get_client_token()
            if token is None:
                logger.info("No client token for %s; requesting one", self.name)
                token = await self.request_access_token(ClientCredentialsTokenRequest())
        return token

    async def _refresh_or_reissue(
        self, request: ApiRequest, category: RequestCategory, stale: Token
    ) -> Token:
        user_id = (
            getattr(request, "user_id", None)
            if category is RequestCategory.USER_RESOURCE
            else None
        )

        async with self._cache.lock(user_id):
            current = self._cache.peek(user_id)
            if current is not None and current.access_token != stale.access_token:
                logger.debug("Token for %s already renewed by a concurrent request", self.name)
                return current

            refresh_error: Optional[BadResponse] = None
            if stale.refresh_token:
                try:
                    logger.info("Refreshing expired token for client %s", self.name)
                    return await self.request_access_token(
                        RefreshTokenRequest(refresh_token=stale.refresh_token, user_id=user_id)
                    )
                except BadResponse as exc:
                    if not exc.is_client_error:
                        raise
                    logger.warning(
                        "Refresh token rejected with status %s; reissuing", exc.status_code
                    )
                    refresh_error = exc

            if category is RequestCategory.USER_RESOURCE:
                raise UserAuthenticationRequired(user_id) from refresh_error  # type: ignore[arg-type]

            logger.info("Reissuing client token for %s", self.name)
            return await self.request_access_token(ClientCredentialsTokenRequest())


__all__ = ["OAuth2Client"]
