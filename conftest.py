import json
import os

import pytest
import requests

pytest_plugins = ["json_assert.plugin"]

TESTS_DIR = os.path.join(os.path.dirname(__file__), "tests")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep JSON_ASSERT_* variables from the developer's shell out of the tests."""
    for name in list(os.environ):
        if name.startswith("JSON_ASSERT_"):
            monkeypatch.delenv(name)


@pytest.fixture(scope="session")
def schema_path():
    """Return a function mapping a fixture schema name to its path under tests/schemas/."""
    def _path(name):
        return os.path.join(TESTS_DIR, "schemas", name)
    return _path


@pytest.fixture(scope="session")
def json_path():
    """Return a function mapping a fixture document name to its path under tests/json/."""
    def _path(name):
        return os.path.join(TESTS_DIR, "json", name)
    return _path


@pytest.fixture
def load_json(json_path):
    def _load(name):
        with open(json_path(name)) as f:
            return json.load(f)
    return _load


@pytest.fixture
def make_response():
    """Build a requests.Response carrying ``body`` without touching the network."""
    def _make(body, status_code=200):
        resp = requests.Response()
        resp.status_code = status_code
        resp._content = body.encode("utf-8") if isinstance(body, str) else body
        resp.encoding = "utf-8"
        resp.headers["Content-Type"] = "application/json"
        return resp
    return _make
