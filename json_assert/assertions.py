"""Assertions to validate JSON data.

- All assert methods expect deserialized JSON data (a dict, list or scalar)
  since the deserialization method should be up to the caller.
- get_json_object() turns raw JSON text (or a ``requests.Response``) into such data.

Usage::

    from json_assert import assert_json_matches_schema, assert_json_value_equals

    def test_user(api_client):
        resp = api_client.get("/api/users/1")
        assert_json_matches_schema(resp.json(), "schemas/user.json")
        assert_json_value_equals(1, "data.id", resp.json())

Inside pytest prefer the ``json_assert`` fixture from ``json_assert.plugin``,
which gets a fresh schema store per test.
"""
from typing import Any, Optional

import pytest
import requests

from json_assert.config import merged_config
from json_assert.errors import AssertionFailed, JsonAssertionError, ValidationFailed
from json_assert.expression import check_value_equals
from json_assert.loader import SchemaLoader
from json_assert.schema import format_diagnostic, validate
from json_assert.store import SchemaStore, ensure_store
from json_assert.values import get_json_object


class Reporter:
    """Failure reporting capability: receives every failed assertion.

    A reporter that returns instead of raising lets the test continue.
    """

    def report_failure(self, error: JsonAssertionError) -> None:
        raise NotImplementedError


class RaisingReporter(Reporter):
    """Raises assertion failures as they are."""

    def report_failure(self, error: JsonAssertionError) -> None:
        raise error


class PytestReporter(Reporter):
    """Reports assertion failures through ``pytest.fail`` without a traceback."""

    def report_failure(self, error: JsonAssertionError) -> None:
        pytest.fail(str(error), pytrace=False)


REPORTERS = {"raise": RaisingReporter, "pytest": PytestReporter}


def _reporter_for(name: str) -> Reporter:
    try:
        return REPORTERS[name]()
    except KeyError:
        raise ValueError(f"Unknown reporter {name!r}; expected one of {sorted(REPORTERS)}") from None


class JsonAssertions:
    def __init__(
        self,
        store: Optional[SchemaStore] = None,
        reporter: Optional[Reporter] = None,
        config: Optional[dict] = None,
    ):
        self.config = config if config is not None else merged_config()
        self._store = store
        self.reporter = reporter or _reporter_for(self.config.get("reporter", "raise"))

    @property
    def draft(self) -> str:
        return self.config.get("draft") or "draft7"

    @property
    def store(self) -> SchemaStore:
        # the process-wide store is created on first use, not at construction
        return self._store if self._store is not None else ensure_store(draft=self.draft)

    @property
    def loader(self) -> SchemaLoader:
        return SchemaLoader(self.store, schema_dir=self.config.get("schema_dir"), draft=self.draft)

    def assert_json_matches_schema(self, content: Any, schema: Optional[str] = None) -> None:
        """Assert that ``content`` is valid according to the schema file at ``schema``.

        Example::

            assertions.assert_json_matches_schema(json.loads('{"foo":1}'), "./schema.json")
        """
        loader = self.loader
        uri = schema_doc = None
        if schema is not None:
            uri, schema_doc = loader.load_from_file(schema)
        self._check_schema(content, schema_doc, uri, loader)

    def assert_json_matches_schema_string(self, schema: str, content: Any) -> None:
        """Assert that ``content`` is valid according to the schema given as text."""
        loader = self.loader
        use_tempfile = self.config.get("schema_strings") == "tempfile"
        uri, schema_doc = loader.load_from_string(schema, use_tempfile=use_tempfile)
        self._check_schema(content, schema_doc, uri, loader)

    def assert_json_value_equals(self, expected: Any, expression: str, json: Any) -> None:
        """Assert that the value selected by ``expression`` equals ``expected``, type included.

        Example::

            assertions.assert_json_value_equals(33, "foo.bar[0]", data)
        """
        data = self.get_json_object(json)
        try:
            check_value_equals(expected, expression, data)
        except AssertionFailed as exc:
            self.reporter.report_failure(exc)

    def get_json_object(self, data: Any) -> Any:
        return get_json_object(data, strict=self.config.get("strict_json", False))

    def _check_schema(self, content, schema_doc, uri, loader: SchemaLoader) -> None:
        if isinstance(content, requests.Response):
            content = self.get_json_object(content)
        result = validate(
            content,
            schema_doc,
            loader.store,
            uri=uri,
            retrieve=loader.retrieve,
            draft=loader.draft,
            format_checking=self.config.get("format_checking", False),
        )
        if not result.valid:
            diagnostic = format_diagnostic(result.violations, content)
            self.reporter.report_failure(ValidationFailed(diagnostic, result.violations))


def _default() -> JsonAssertions:
    return JsonAssertions()


def assert_json_matches_schema(content: Any, schema: Optional[str] = None) -> None:
    _default().assert_json_matches_schema(content, schema)


def assert_json_matches_schema_string(schema: str, content: Any) -> None:
    _default().assert_json_matches_schema_string(schema, content)


def assert_json_value_equals(expected: Any, expression: str, json: Any) -> None:
    _default().assert_json_value_equals(expected, expression, json)
