from __future__ import annotations

import pytest
from pydantic import ValidationError

from oauth2_orchestrator.core.config import AppSettings, OAuth2ClientSettings, get_settings


def test_settings_read_environment(monkeypatch) -> None:
    monkeypatch.setenv("OAUTH2_CLIENT_NAME", "billing")
    monkeypatch.setenv("OAUTH2_API_BASE_URL", "https://billing.example.com")
    monkeypatch.setenv("OAUTH2_TOKEN_URI", "https://auth.example.com/token")
    monkeypatch.setenv("OAUTH2_FORMAT", " FORM ")
    monkeypatch.setenv("OAUTH2_TIMEOUT", "2.5")

    settings = OAuth2ClientSettings()

    assert settings.name == "billing"
    assert str(settings.api_base_url).startswith("https://billing.example.com")
    assert settings.token_uri == "https://auth.example.com/token"
    assert settings.wire_format == "form"
    assert settings.timeout_seconds == 2.5


def test_settings_defaults() -> None:
    settings = OAuth2ClientSettings(
        api_base_url="https://api.example.com",
        client_id="id",
        client_secret="secret",
    )

    assert settings.token_uri == "/oauth/v2/token"
    assert settings.wire_format == "json"


def test_unsupported_format_is_rejected() -> None:
    with pytest.raises(ValidationError):
        OAuth2ClientSettings(
            OAUTH2_API_BASE_URL="https://api.example.com",
            OAUTH2_CLIENT_ID="id",
            OAUTH2_CLIENT_SECRET="secret",
            OAUTH2_FORMAT="xml",
        )


def test_app_settings_nest_client_settings(monkeypatch) -> None:
    monkeypatch.setenv("APP_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("OAUTH2_CLIENT_ID", "nested-id")
    get_settings.cache_clear()

    try:
        settings = get_settings()
        assert isinstance(settings, AppSettings)
        assert settings.log_level == "DEBUG"
        assert settings.oauth2.client_id == "nested-id"
        assert get_settings() is settings
    finally:
        get_settings.cache_clear()
