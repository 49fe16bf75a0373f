"""json-assert: JSON Schema and JMESPath assertions for tests."""

__version__ = "0.1.0"

from json_assert.assertions import (
    JsonAssertions,
    PytestReporter,
    RaisingReporter,
    Reporter,
    assert_json_matches_schema,
    assert_json_matches_schema_string,
    assert_json_value_equals,
)
from json_assert.errors import (
    AssertionFailed,
    InvalidExpression,
    JsonAssertError,
    JsonAssertionError,
    JsonParseError,
    SchemaNotFound,
    SchemaParseError,
    ValidationFailed,
)
from json_assert.expression import json_equal, search
from json_assert.loader import SchemaLoader
from json_assert.schema import ValidationResult, Violation, format_diagnostic, validate
from json_assert.store import SchemaStore, ensure_store, reset_store
from json_assert.values import get_json_object

__all__ = [
    # Assertions
    "JsonAssertions",
    "PytestReporter",
    "RaisingReporter",
    "Reporter",
    "assert_json_matches_schema",
    "assert_json_matches_schema_string",
    "assert_json_value_equals",
    "get_json_object",
    # Schemas
    "SchemaLoader",
    "SchemaStore",
    "ValidationResult",
    "Violation",
    "ensure_store",
    "format_diagnostic",
    "reset_store",
    "validate",
    # Expressions
    "json_equal",
    "search",
    # Errors
    "AssertionFailed",
    "InvalidExpression",
    "JsonAssertError",
    "JsonAssertionError",
    "JsonParseError",
    "SchemaNotFound",
    "SchemaParseError",
    "ValidationFailed",
]
