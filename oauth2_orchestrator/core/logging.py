"""
Logging utilities for applications embedding the OAuth2 client.

Provides a consistent logging format and configuration.
"""

import logging
import sys


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging with a sensible default format."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        stream=sys.stdout,
    )
    # httpx logs every request at INFO, including token endpoint calls.
    logging.getLogger("httpx").setLevel(max(logging.getLevelName(level.upper()), logging.WARNING))


__all__ = ["configure_logging"]
