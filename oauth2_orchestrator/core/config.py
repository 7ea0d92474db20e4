"""
Configuration models and helpers.

Centralizes settings management so every OAuth2 client built by the package
reads the same environment variables and ``.env`` file.
"""

from functools import lru_cache

from pydantic import AnyHttpUrl, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from oauth2_orchestrator.clients.serializer import SUPPORTED_FORMATS

_ENV_CONFIG = SettingsConfigDict(
    env_file=".env",
    env_file_encoding="utf-8",
    populate_by_name=True,
    extra="ignore",
)


class OAuth2ClientSettings(BaseSettings):
    """Configuration of one named OAuth2 client."""

    model_config = _ENV_CONFIG

    name: str = Field("default", alias="OAUTH2_CLIENT_NAME")
    api_base_url: AnyHttpUrl = Field(..., alias="OAUTH2_API_BASE_URL")
    client_id: str = Field(..., alias="OAUTH2_CLIENT_ID")
    client_secret: str = Field(..., alias="OAUTH2_CLIENT_SECRET")
    token_uri: str = Field(
        "/oauth/v2/token",
        alias="OAUTH2_TOKEN_URI",
        description="Token endpoint, absolute or relative to the API base URL.",
    )
    wire_format: str = Field("json", alias="OAUTH2_FORMAT")
    timeout_seconds: float = Field(10.0, alias="OAUTH2_TIMEOUT", gt=0)

    @field_validator("wire_format")
    @classmethod
    def _check_format(cls, value: str) -> str:
        fmt = value.strip().lower()
        if fmt not in SUPPORTED_FORMATS:
            raise ValueError(
                f"Unsupported wire format {value!r}; expected one of {', '.join(SUPPORTED_FORMATS)}."
            )
        return fmt


class AppSettings(BaseSettings):
    """Root settings object."""

    model_config = _ENV_CONFIG

    environment: str = Field("development", alias="APP_ENV")
    log_level: str = Field("INFO", alias="APP_LOG_LEVEL")
    oauth2: OAuth2ClientSettings = Field(default_factory=OAuth2ClientSettings)


@lru_cache()
def get_settings() -> AppSettings:
    """Return a cached settings object."""
    return AppSettings()  # type: ignore[call-arg]


__all__ = [
    "AppSettings",
    "OAuth2ClientSettings",
    "get_settings",
]
