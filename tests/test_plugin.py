from json_assert import JsonAssertions, ensure_store


def test_schema_store_is_process_wide(schema_store):
    assert ensure_store() is schema_store


def test_schema_store_is_fresh_per_test(schema_store, schema_path, json_assert):
    # both tests register the same schema; neither sees the other's registration
    assert len(schema_store) == 0
    json_assert.assert_json_matches_schema({"foo": 1}, schema_path("test.schema.json"))
    assert len(schema_store) == 1


def test_schema_store_is_fresh_per_test_again(schema_store, schema_path, json_assert):
    assert len(schema_store) == 0
    json_assert.assert_json_matches_schema({"foo": 1}, schema_path("test.schema.json"))
    assert len(schema_store) == 1


def test_json_assert_fixture(json_assert, schema_store, json_assert_config):
    assert isinstance(json_assert, JsonAssertions)
    assert json_assert.store is schema_store
    assert json_assert.config == json_assert_config


def test_ini_option(pytestconfig):
    assert pytestconfig.getini("json_assert_config") == "json_assert.yaml"
