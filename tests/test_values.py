import pytest

from json_assert.errors import JsonParseError
from json_assert.values import canonical_dumps, get_json_object, json_kind


@pytest.mark.parametrize(
    "expected, data",
    [
        ([], []),
        ([], "[]"),
        ({}, {}),
        ({}, "{}"),
        ({"a": [1, 2]}, b'{"a": [1, 2]}'),
        (123, "123"),
        (123, 123),
        (None, None),
    ],
)
def test_get_json_object(expected, data):
    assert get_json_object(data) == expected


def test_structured_data_is_returned_unchanged():
    data = {"a": [1]}
    items = [data]
    assert get_json_object(data) is data
    assert get_json_object(items) is items


@pytest.mark.parametrize("data", [[], "[]", {}, "{}", '{"a": {"b": [1, null]}}', "not json", 1.5, [{"x": "y"}]])
def test_get_json_object_is_idempotent(data):
    once = get_json_object(data)
    assert get_json_object(once) == once


def test_malformed_text_is_none():
    assert get_json_object("{not json") is None
    assert get_json_object("") is None


def test_malformed_text_strict():
    with pytest.raises(JsonParseError) as excinfo:
        get_json_object("{not json", strict=True)
    assert excinfo.value.text == "{not json"


def test_response_is_decoded(make_response):
    assert get_json_object(make_response('{"data": [1]}')) == {"data": [1]}


def test_response_without_json_body(make_response):
    assert get_json_object(make_response("<html></html>", status_code=500)) is None
    with pytest.raises(JsonParseError):
        get_json_object(make_response("<html></html>"), strict=True)


@pytest.mark.parametrize(
    "value, kind",
    [
        (None, "null"),
        (True, "boolean"),
        (1, "integer"),
        (1.0, "number"),
        ("1", "string"),
        ([], "array"),
        ({}, "object"),
    ],
)
def test_json_kind(value, kind):
    assert json_kind(value) == kind


def test_canonical_dumps():
    assert canonical_dumps({"foo": "123"}) == '{"foo":"123"}'
    assert canonical_dumps([1, None, True]) == "[1,null,true]"
