"""Configuration for json-assert.

Configuration is a plain dict, read from a YAML file and overlaid with
environment variables when present:

  - JSON_ASSERT_SCHEMA_DIR
  - JSON_ASSERT_DRAFT
  - JSON_ASSERT_FORMAT_CHECKING (true/false)
  - JSON_ASSERT_STRICT_JSON (true/false)
"""
import os

import yaml
from jsonschema import (
    Draft3Validator,
    Draft4Validator,
    Draft6Validator,
    Draft7Validator,
    Draft201909Validator,
    Draft202012Validator,
)
from referencing.jsonschema import (
    DRAFT3,
    DRAFT4,
    DRAFT6,
    DRAFT7,
    DRAFT201909,
    DRAFT202012,
)

DEFAULTS = {
    "schema_dir": None,
    "draft": "draft7",
    "format_checking": False,
    "strict_json": False,
    "schema_strings": "memory",
    "reporter": "raise",
}

# draft name -> (validator class, referencing specification)
DRAFTS = {
    "draft3": (Draft3Validator, DRAFT3),
    "draft4": (Draft4Validator, DRAFT4),
    "draft6": (Draft6Validator, DRAFT6),
    "draft7": (Draft7Validator, DRAFT7),
    "draft2019-09": (Draft201909Validator, DRAFT201909),
    "draft2020-12": (Draft202012Validator, DRAFT202012),
}


def resolve_draft(name: str):
    """Return ``(validator_class, specification)`` for a draft name."""
    try:
        return DRAFTS[name.lower()]
    except KeyError:
        raise ValueError(f"Unknown JSON Schema draft {name!r}; expected one of {sorted(DRAFTS)}") from None


def _as_bool(value: str) -> bool:
    return value.lower() not in ("0", "false", "no")


def load_config(path) -> dict:
    """Read a YAML config file. A missing file is an empty config."""
    if path is None or not os.path.exists(path):
        return {}
    with open(path) as f:
        return yaml.safe_load(f) or {}


def merged_config(config=None) -> dict:
    """Return DEFAULTS overlaid with ``config`` and then with environment variables."""
    cfg = dict(DEFAULTS)
    cfg.update(config or {})

    schema_dir = os.environ.get("JSON_ASSERT_SCHEMA_DIR")
    if schema_dir:
        cfg["schema_dir"] = schema_dir

    draft = os.environ.get("JSON_ASSERT_DRAFT")
    if draft:
        cfg["draft"] = draft

    format_checking = os.environ.get("JSON_ASSERT_FORMAT_CHECKING")
    if format_checking is not None:
        cfg["format_checking"] = _as_bool(format_checking)

    strict = os.environ.get("JSON_ASSERT_STRICT_JSON")
    if strict is not None:
        cfg["strict_json"] = _as_bool(strict)

    return cfg
