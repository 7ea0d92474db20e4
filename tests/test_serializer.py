from __future__ import annotations

from typing import List

import pytest
from pydantic import BaseModel

from oauth2_orchestrator.clients.serializer import PydanticSerializer, decode_json
from oauth2_orchestrator.exceptions import ResponseDecodeError, UnsupportedFormatError
from oauth2_orchestrator.models.token import Token


class Profile(BaseModel):
    id: int
    name: str


def test_decode_without_target_returns_mapping() -> None:
    serializer = PydanticSerializer()

    assert serializer.decode(b'{"id": 1, "name": "Ada"}', None, "json") == {"id": 1, "name": "Ada"}


def test_decode_into_model_and_collection() -> None:
    serializer = PydanticSerializer()

    profile = serializer.decode(b'{"id": 1, "name": "Ada"}', Profile, "json")
    profiles = serializer.decode(b'[{"id": 1, "name": "Ada"}]', List[Profile], "json")

    assert profile == Profile(id=1, name="Ada")
    assert profiles == [Profile(id=1, name="Ada")]


def test_decode_form_encoded_token() -> None:
    serializer = PydanticSerializer()

    token = serializer.decode(
        b"access_token=abc&token_type=bearer&expires_in=60", Token, "form"
    )

    assert token.access_token == "abc"
    assert token.expires_in == 60


def test_empty_body_decodes_to_none() -> None:
    assert decode_json(b"") is None
    assert PydanticSerializer().decode(b"  ", None, "JSON") is None


def test_invalid_json_raises_decode_error() -> None:
    with pytest.raises(ResponseDecodeError):
        PydanticSerializer().decode(b"<html>", None, "json")


def test_payload_mismatch_raises_decode_error() -> None:
    with pytest.raises(ResponseDecodeError):
        PydanticSerializer().decode(b'{"id": "x"}', Profile, "json")


def test_unknown_format_is_rejected() -> None:
    with pytest.raises(UnsupportedFormatError):
        PydanticSerializer().decode(b"<a/>", None, "xml")
