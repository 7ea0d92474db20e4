"""Service layer exports."""

from .oauth2_client import OAuth2Client
from .request_classifier import RequestCategory, classify_request
from .token_cache import TokenCache

__all__ = [
    "OAuth2Client",
    "RequestCategory",
    "TokenCache",
    "classify_request",
]
