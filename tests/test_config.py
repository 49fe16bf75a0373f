import pytest
from jsonschema import Draft7Validator, Draft202012Validator

from json_assert.config import DEFAULTS, load_config, merged_config, resolve_draft


def test_defaults():
    assert merged_config() == DEFAULTS


def test_load_missing_file(tmp_path):
    assert load_config(str(tmp_path / "json_assert.yaml")) == {}
    assert load_config(None) == {}


def test_load_yaml(tmp_path):
    path = tmp_path / "json_assert.yaml"
    path.write_text("schema_dir: schemas\ndraft: draft2020-12\nformat_checking: true\n")

    cfg = merged_config(load_config(str(path)))
    assert cfg["schema_dir"] == "schemas"
    assert cfg["draft"] == "draft2020-12"
    assert cfg["format_checking"] is True
    assert cfg["strict_json"] is False


def test_empty_yaml(tmp_path):
    path = tmp_path / "json_assert.yaml"
    path.write_text("")
    assert load_config(str(path)) == {}


def test_env_overrides_file(monkeypatch):
    monkeypatch.setenv("JSON_ASSERT_SCHEMA_DIR", "/srv/schemas")
    monkeypatch.setenv("JSON_ASSERT_DRAFT", "draft4")
    monkeypatch.setenv("JSON_ASSERT_FORMAT_CHECKING", "yes")
    monkeypatch.setenv("JSON_ASSERT_STRICT_JSON", "false")

    cfg = merged_config({"schema_dir": "schemas", "strict_json": True})
    assert cfg["schema_dir"] == "/srv/schemas"
    assert cfg["draft"] == "draft4"
    assert cfg["format_checking"] is True
    assert cfg["strict_json"] is False


def test_resolve_draft():
    assert resolve_draft("draft7")[0] is Draft7Validator
    assert resolve_draft("Draft2020-12")[0] is Draft202012Validator


def test_resolve_unknown_draft():
    with pytest.raises(ValueError):
        resolve_draft("draft99")
