"""pytest fixtures for json-assert.

Enable in a conftest.py::

    pytest_plugins = ["json_assert.plugin"]

Configuration is read from ``json_assert.yaml`` in the rootdir (see the
``json_assert_config`` ini option) and overlaid with JSON_ASSERT_* environment
variables.
"""
import pytest

from json_assert.assertions import JsonAssertions
from json_assert.config import load_config, merged_config
from json_assert.store import reset_store


def pytest_addoption(parser):
    parser.addini(
        "json_assert_config",
        help="YAML configuration file for json-assert, relative to the rootdir",
        default="json_assert.yaml",
    )


@pytest.fixture(scope="session")
def json_assert_config(request):
    """Return json-assert configuration (YAML file overlaid with env vars)."""
    path = request.config.rootpath / request.config.getini("json_assert_config")
    return merged_config(load_config(str(path)))


@pytest.fixture
def schema_store(json_assert_config):
    """A fresh process-wide schema store for each test."""
    return reset_store(draft=json_assert_config.get("draft", "draft7"))


@pytest.fixture
def json_assert(schema_store, json_assert_config):
    """JsonAssertions bound to this test's schema store."""
    return JsonAssertions(store=schema_store, config=json_assert_config)
