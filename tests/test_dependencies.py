from __future__ import annotations

import pytest

from oauth2_orchestrator import dependencies
from oauth2_orchestrator.models.token import Token
from oauth2_orchestrator.services import OAuth2Client


@pytest.fixture(autouse=True)
def fresh_dependencies(monkeypatch):
    monkeypatch.setenv("OAUTH2_CLIENT_NAME", "wired")
    monkeypatch.setenv("OAUTH2_API_BASE_URL", "https://wired.example.com")
    dependencies.reset_dependencies()
    yield
    dependencies.reset_dependencies()


def test_oauth2_client_is_a_shared_singleton() -> None:
    client = dependencies.get_oauth2_client()

    assert isinstance(client, OAuth2Client)
    assert client is dependencies.get_oauth2_client()
    assert client.name == "wired"
    assert client.base_url.startswith("https://wired.example.com")
    assert dependencies.get_transport().base_url == client.base_url


def test_client_writes_through_to_shared_token_manager() -> None:
    client = dependencies.get_oauth2_client()

    client.token_cache.put(Token(access_token="shared"))

    stored = dependencies.get_token_manager().load_client_token("wired")
    assert stored.access_token == "shared"


def test_building_client_configures_logging(monkeypatch) -> None:
    levels: list[str] = []
    monkeypatch.setenv("APP_LOG_LEVEL", "DEBUG")
    monkeypatch.setattr(dependencies.clients, "configure_logging", levels.append)
    dependencies.reset_dependencies()

    dependencies.get_oauth2_client()
    dependencies.get_oauth2_client()

    assert levels == ["DEBUG"]
