"""JSON schema validation and failure diagnostics.

validate() runs the ``jsonschema`` engine against a document held in a
SchemaStore and returns every broken constraint as a Violation.
format_diagnostic() turns those into the message attached to a failed
assertion::

    - Property: foo, Constraint: type, Message: String value found, but an integer is required
    - Response: {"foo":"123"}
"""
import re
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Optional, Tuple

from jsonschema import ValidationError
from jsonschema.validators import validator_for

from json_assert.config import resolve_draft
from json_assert.store import SchemaStore
from json_assert.values import canonical_dumps, json_kind

DIAGNOSTIC_LINE = "- Property: {path}, Constraint: {constraint}, Message: {message}"


@dataclass(frozen=True)
class Violation:
    property_path: str
    constraint: str
    message: str


@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    violations: Tuple[Violation, ...] = ()


def validate(
    content: Any,
    schema: Any,
    store: SchemaStore,
    *,
    uri: Optional[str] = None,
    retrieve: Optional[Callable] = None,
    draft: Optional[str] = None,
    format_checking: bool = False,
) -> ValidationResult:
    """Validate ``content`` against ``schema``.

    ``schema`` None means no explicit schema; everything validates. When
    ``uri`` is given the schema is entered through the store under that URI,
    so relative ``$ref``s resolve against it. ``draft`` (the store's draft by
    default) picks both the validator for schemas without ``$schema`` and the
    way registered schemas are indexed for references.
    """
    draft = draft or store.draft
    default_cls, _ = resolve_draft(draft)
    if schema is None:
        schema = True
    cls = validator_for(schema, default=default_cls)

    kwargs = {"registry": store.registry(retrieve, draft)}
    if format_checking:
        kwargs["format_checker"] = cls.FORMAT_CHECKER
    validator = cls({"$ref": uri} if uri is not None else schema, **kwargs)

    violations = tuple(_to_violation(e) for e in validator.iter_errors(content))
    return ValidationResult(valid=not violations, violations=violations)


def format_diagnostic(violations: Iterable[Violation], content: Any) -> str:
    lines = [
        DIAGNOSTIC_LINE.format(path=v.property_path, constraint=v.constraint, message=v.message)
        for v in violations
    ]
    lines.append(f"- Response: {canonical_dumps(content)}")
    return "\n".join(lines)


def property_path(path: Iterable) -> str:
    """Render an instance path as ``a.b[0].c``; the root is the empty string."""
    rendered = ""
    for part in path:
        if isinstance(part, int):
            rendered += f"[{part}]"
        elif rendered:
            rendered += f".{part}"
        else:
            rendered = str(part)
    return rendered


def _to_violation(error: ValidationError) -> Violation:
    path = list(error.absolute_path)
    message = error.message
    formatter = _MESSAGES.get(error.validator)
    if formatter is not None:
        message = formatter(error) or message

    if error.validator == "required":
        missing = _missing_property(error)
        if missing is not None:
            path.append(missing)

    return Violation(property_path=property_path(path), constraint=str(error.validator), message=message)


def _article(name: str) -> str:
    return f"an {name}" if name[:1] in "aeiou" else f"a {name}"


def _type_message(error):
    wanted = error.validator_value
    if isinstance(wanted, str):
        wanted = [wanted]
    found = json_kind(error.instance).capitalize()
    return f"{found} value found, but {' or '.join(_article(str(t)) for t in wanted)} is required"


def _missing_property(error) -> Optional[str]:
    if not isinstance(error.instance, dict) or not isinstance(error.validator_value, list):
        return None
    for name in error.validator_value:
        if name not in error.instance and error.message == f"{name!r} is a required property":
            return name
    return None


def _required_message(error):
    missing = _missing_property(error)
    return f"The property {missing} is required" if missing is not None else None


def _additional_properties_message(error):
    if error.validator_value is not False or not isinstance(error.instance, dict):
        return None
    properties = error.schema.get("properties", {})
    patterns = error.schema.get("patternProperties", {})
    extras = [
        key for key in error.instance
        if key not in properties and not any(re.search(p, key) for p in patterns)
    ]
    return (
        f"The property {', '.join(extras)} is not defined and the definition "
        "does not allow additional properties"
    )


_MESSAGES = {
    "type": _type_message,
    "required": _required_message,
    "additionalProperties": _additional_properties_message,
    "enum": lambda e: f"Does not have a value in the enumeration {canonical_dumps(e.validator_value)}",
    "const": lambda e: f"Does not have a value equal to {canonical_dumps(e.validator_value)}",
    "minimum": lambda e: f"Must have a minimum value of {e.validator_value}",
    "maximum": lambda e: f"Must have a maximum value of {e.validator_value}",
    "minLength": lambda e: f"Must be at least {e.validator_value} characters long",
    "maxLength": lambda e: f"Must be at most {e.validator_value} characters long",
    "pattern": lambda e: f"Does not match the regex pattern {e.validator_value}",
    "minItems": lambda e: f"There must be a minimum of {e.validator_value} items in the array",
    "maxItems": lambda e: f"There must be a maximum of {e.validator_value} items in the array",
}
