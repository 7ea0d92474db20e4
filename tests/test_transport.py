from __future__ import annotations

import json
from urllib.parse import parse_qs

import httpx
import pytest

from oauth2_orchestrator.clients import HttpxTransport
from oauth2_orchestrator.exceptions import BadResponse


class RecordingHandler:
    def __init__(self, response: httpx.Response) -> None:
        self.response = response
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.response


@pytest.mark.anyio
async def test_send_request_returns_status_headers_and_body() -> None:
    handler = RecordingHandler(httpx.Response(200, json={"ok": True}))
    transport = HttpxTransport(
        "https://api.example.com", transport=httpx.MockTransport(handler)
    )

    response = await transport.send_request(
        "GET", "/items", {"X-Trace": "1"}, None, {"params": {"page": "2"}}
    )

    assert response.status_code == 200
    assert json.loads(response.body) == {"ok": True}
    assert response.headers["content-type"] == "application/json"
    sent = handler.requests[0]
    assert str(sent.url) == "https://api.example.com/items?page=2"
    assert sent.headers["X-Trace"] == "1"


@pytest.mark.anyio
async def test_mapping_body_is_form_encoded() -> None:
    handler = RecordingHandler(httpx.Response(200, json={}))
    transport = HttpxTransport(
        "https://api.example.com", transport=httpx.MockTransport(handler)
    )

    await transport.send_request(
        "POST", "/oauth/token", {}, {"grant_type": "client_credentials"}, {}
    )

    sent = handler.requests[0]
    assert sent.headers["content-type"] == "application/x-www-form-urlencoded"
    assert parse_qs(sent.content.decode()) == {"grant_type": ["client_credentials"]}


@pytest.mark.anyio
async def test_error_status_raises_bad_response() -> None:
    handler = RecordingHandler(httpx.Response(404, text="missing"))
    transport = HttpxTransport(
        "https://api.example.com", transport=httpx.MockTransport(handler)
    )

    with pytest.raises(BadResponse) as excinfo:
        await transport.send_request("DELETE", "/items/1", {}, None, {})

    assert excinfo.value.status_code == 404
    assert excinfo.value.text == "missing"
    assert excinfo.value.is_client_error
    assert excinfo.value.method == "DELETE"
    assert excinfo.value.uri == "/items/1"


@pytest.mark.anyio
async def test_network_errors_propagate() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    transport = HttpxTransport(
        "https://api.example.com", transport=httpx.MockTransport(handler)
    )

    with pytest.raises(httpx.ConnectError):
        await transport.send_request("GET", "/items", {}, None, {})
