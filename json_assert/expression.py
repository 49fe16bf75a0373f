"""JMESPath lookups and strict JSON equality."""
from functools import lru_cache
from typing import Any

import jmespath
from jmespath.exceptions import JMESPathError

from json_assert.errors import AssertionFailed, InvalidExpression
from json_assert.values import canonical_dumps, json_kind


@lru_cache(maxsize=256)
def _compile(expression: str):
    try:
        return jmespath.compile(expression)
    except JMESPathError as exc:
        raise InvalidExpression(f"Invalid JMESPath expression: {exc}", expression=expression) from exc


def search(expression: str, data: Any) -> Any:
    """Evaluate ``expression`` against ``data``; None when nothing is selected.

    Compile and evaluation errors (e.g. ``sort(@)`` on an object) both raise
    InvalidExpression.
    """
    compiled = _compile(expression)
    try:
        return compiled.search(data)
    except JMESPathError as exc:
        raise InvalidExpression(f"JMESPath evaluation failed: {exc}", expression=expression) from exc


def json_equal(expected: Any, actual: Any) -> bool:
    """Structural equality that also requires identical types at every level.

    ``1``, ``1.0``, ``True`` and ``"1"`` are all different here, unlike with ``==``.
    """
    if type(expected) is not type(actual):
        return False
    if isinstance(expected, dict):
        return expected.keys() == actual.keys() and all(json_equal(v, actual[k]) for k, v in expected.items())
    if isinstance(expected, list):
        return len(expected) == len(actual) and all(json_equal(e, a) for e, a in zip(expected, actual))
    return expected == actual


def _describe(value: Any) -> str:
    try:
        rendered = canonical_dumps(value)
    except (TypeError, ValueError):
        rendered = repr(value)
    return f"{rendered} ({json_kind(value)})"


def check_value_equals(expected: Any, expression: str, data: Any) -> Any:
    """Select ``expression`` from ``data`` and compare it with ``expected``.

    Returns the selected value, or raises AssertionFailed when value or type differ.
    """
    actual = search(expression, data)
    if not json_equal(expected, actual):
        raise AssertionFailed(
            f"Failed asserting that {expression!r} selects {_describe(expected)}; got {_describe(actual)}",
            expected=expected,
            actual=actual,
            expression=expression,
        )
    return actual
