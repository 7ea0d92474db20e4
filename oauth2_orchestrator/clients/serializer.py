"""Response body decoding backed by pydantic."""

from __future__ import annotations

import json
from functools import lru_cache
from typing import Any, Dict, Optional, Protocol
from urllib.parse import parse_qsl

from pydantic import TypeAdapter, ValidationError

from oauth2_orchestrator.exceptions import ResponseDecodeError, UnsupportedFormatError

JSON_FORMAT = "json"
FORM_FORMAT = "form"
SUPPORTED_FORMATS = (JSON_FORMAT, FORM_FORMAT)


class Serializer(Protocol):
    def decode(self, raw_body: bytes, target: Optional[Any], fmt: str) -> Any:
        ...


@lru_cache(maxsize=128)
def _adapter_for(target: Any) -> TypeAdapter:
    return TypeAdapter(target)


def decode_json(raw_body: bytes) -> Any:
    """Decode a JSON body into plain Python values; empty bodies yield ``None``."""
    if not raw_body or not raw_body.strip():
        return None
    try:
        return json.loads(raw_body)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ResponseDecodeError(f"Response body is not valid JSON: {exc}") from exc


def decode_form(raw_body: bytes) -> Dict[str, str]:
    text = raw_body.decode("utf-8", errors="replace")
    return dict(parse_qsl(text, keep_blank_values=True))


class PydanticSerializer:
    """Decode bodies into a target type, or into generic mappings without one."""

    def decode(self, raw_body: bytes, target: Optional[Any] = None, fmt: str = JSON_FORMAT) -> Any:
        data = self._decode_generic(raw_body, fmt)
        if target is None:
            return data
        try:
            return _adapter_for(target).validate_python(data)
        except ValidationError as exc:
            raise ResponseDecodeError(
                f"Response body does not match {getattr(target, '__name__', target)}: {exc}"
            ) from exc

    @staticmethod
    def _decode_generic(raw_body: bytes, fmt: str) -> Any:
        fmt = fmt.lower()
        if fmt == JSON_FORMAT:
            return decode_json(raw_body)
        if fmt == FORM_FORMAT:
            return decode_form(raw_body)
        raise UnsupportedFormatError(f"No decoder registered for format {fmt!r}.")


__all__ = [
    "FORM_FORMAT",
    "JSON_FORMAT",
    "PydanticSerializer",
    "SUPPORTED_FORMATS",
    "Serializer",
    "decode_form",
    "decode_json",
]
