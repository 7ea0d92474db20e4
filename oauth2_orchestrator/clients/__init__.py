"""Expose the transport, serializer and token persistence collaborators."""

from .serializer import PydanticSerializer, Serializer, decode_json
from .token_manager import InMemoryTokenManager, TokenManager
from .transport import HttpxTransport, Transport, TransportResponse

__all__ = [
    "HttpxTransport",
    "InMemoryTokenManager",
    "PydanticSerializer",
    "Serializer",
    "TokenManager",
    "Transport",
    "TransportResponse",
    "decode_json",
]
