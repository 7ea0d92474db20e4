"""
Factory functions providing shared OAuth2 client collaborators.
"""

from functools import lru_cache

from oauth2_orchestrator.clients import (
    HttpxTransport,
    InMemoryTokenManager,
    PydanticSerializer,
)
from oauth2_orchestrator.core.config import get_settings
from oauth2_orchestrator.core.logging import configure_logging
from oauth2_orchestrator.services import OAuth2Client


@lru_cache()
def _settings():
    """Internal helper to cache settings for client factories."""
    return get_settings()


@lru_cache()
def get_token_manager() -> InMemoryTokenManager:
    """Provide the process-wide token store."""
    return InMemoryTokenManager()


@lru_cache()
def get_transport() -> HttpxTransport:
    """Provide an httpx transport bound to the configured API base URL."""
    settings = _settings().oauth2
    return HttpxTransport(str(settings.api_base_url), timeout=settings.timeout_seconds)


@lru_cache()
def get_serializer() -> PydanticSerializer:
    return PydanticSerializer()


@lru_cache()
def get_oauth2_client() -> OAuth2Client:
    """Create a singleton OAuth2 client for the configured API."""
    settings = _settings()
    configure_logging(settings.log_level)
    return OAuth2Client(
        settings.oauth2,
        get_token_manager(),
        transport=get_transport(),
        serializer=get_serializer(),
    )


def reset_dependencies() -> None:
    """Drop cached instances so the next call rebuilds them from fresh settings."""
    for factory in (_settings, get_token_manager, get_transport, get_serializer, get_oauth2_client):
        factory.cache_clear()
    get_settings.cache_clear()


__all__ = [
    "get_oauth2_client",
    "get_serializer",
    "get_token_manager",
    "get_transport",
    "reset_dependencies",
]
