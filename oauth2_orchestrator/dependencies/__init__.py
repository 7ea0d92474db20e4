"""Expose factory helpers for wiring OAuth2 clients."""

from .clients import (
    get_oauth2_client,
    get_serializer,
    get_token_manager,
    get_transport,
    reset_dependencies,
)

__all__ = [
    "get_oauth2_client",
    "get_serializer",
    "get_token_manager",
    "get_transport",
    "reset_dependencies",
]
