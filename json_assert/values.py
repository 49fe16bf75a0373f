"""Helpers for deserialized JSON values.

All assert functions expect deserialized JSON data (a dict, list or scalar),
since the deserialization method should be up to the caller. get_json_object()
is the convenience to turn raw JSON text into such data.
"""

from __future__ import annotations

import json
from typing import Any

import requests

from json_assert.errors import JsonParseError

_TEXT_TYPES = (str, bytes, bytearray)


def get_json_object(data: Any, strict: bool = False) -> Any:
    """Return ``data`` as deserialized JSON.

    Dicts and lists are returned unchanged (the same object, not a copy).
    Strings and bytes are decoded as JSON text, and a ``requests.Response``
    is decoded from its body. Anything else is already a JSON value.

    Malformed text decodes to None unless ``strict`` is set, in which case
    JsonParseError is raised.
    """
    if isinstance(data, (dict, list)):
        return data
    if isinstance(data, requests.Response):
        data = data.text
    if not isinstance(data, _TEXT_TYPES):
        return data
    try:
        return json.loads(data)
    except ValueError as exc:
        if strict:
            raise JsonParseError(f"Invalid JSON text: {exc}", text=data) from exc
        return None


def json_kind(value: Any) -> str:
    """Name the JSON type of a deserialized value."""
    if value is None:
        return "null"
    # bool first: bool is a subclass of int
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return "integer"
    if isinstance(value, float):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def canonical_dumps(value: Any) -> str:
    """Compact JSON serialization, e.g. ``{"foo":"123"}``."""
    return json.dumps(value, separators=(",", ":"))
