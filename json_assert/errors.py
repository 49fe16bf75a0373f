"""Typed exceptions for json-assert.

Setup problems (missing schema, malformed schema, bad expression) inherit from
JsonAssertError only. Assertion failures additionally inherit from
AssertionError so test runners report them as failures, not errors.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence


class JsonAssertError(Exception):
    """Base exception for all json-assert errors."""

    def __init__(self, message: str, *, context: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            ctx = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx})"
        return self.message


class SchemaNotFound(JsonAssertError, FileNotFoundError):
    """No schema file exists at the given path."""

    def __init__(self, path: str):
        super().__init__("Schema file not found", context={"path": path})
        self.path = path
        self.filename = path


class SchemaParseError(JsonAssertError, ValueError):
    """Schema file or text is not valid JSON."""

    def __init__(self, message: str, *, source: Optional[str] = None):
        super().__init__(message, context={"source": source} if source else None)
        self.source = source


class JsonParseError(JsonAssertError, ValueError):
    """Raw JSON text could not be decoded (strict coercion only)."""

    def __init__(self, message: str, *, text: Any = None):
        context: dict = {}
        if text is not None:
            # Truncate long values for readability
            str_val = str(text)
            context["text"] = str_val[:100] + "..." if len(str_val) > 100 else str_val
        super().__init__(message, context=context)
        self.text = text


class InvalidExpression(JsonAssertError, ValueError):
    """JMESPath expression could not be compiled or evaluated."""

    def __init__(self, message: str, *, expression: str):
        super().__init__(message, context={"expression": expression})
        self.expression = expression


class JsonAssertionError(JsonAssertError, AssertionError):
    """Base for assertion failures.

    The message is rendered bare so diagnostics show up verbatim in test output.
    """

    def __str__(self) -> str:
        return self.message


class ValidationFailed(JsonAssertionError):
    """Content violates one or more schema constraints."""

    def __init__(self, diagnostic: str, violations: Sequence = ()):
        super().__init__(diagnostic)
        self.diagnostic = diagnostic
        self.violations = tuple(violations)


class AssertionFailed(JsonAssertionError):
    """Selected value differs from the expected value or its type."""

    def __init__(self, message: str, *, expected: Any, actual: Any, expression: str):
        super().__init__(message)
        self.expected = expected
        self.actual = actual
        self.expression = expression
