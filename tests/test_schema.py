"""Tests for schema loading and compilation."""

import json

import pytest

from workflow_schema_check import schema as schema_mod
from workflow_schema_check.errors import FatalSetupError
from workflow_schema_check.schemas import default_schema_path, load_default_schema

PERSON_SCHEMA = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
    "required": ["name"],
    "properties": {"name": {"type": "string"}, "age": {"type": "integer"}},
}

CUSTOM_META_SCHEMA = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "$id": "https://example.com/meta/strict-object.json",
    "allOf": [{"$ref": "http://json-schema.org/draft-07/schema#"}],
    "required": ["type", "title"],
}


def test_packaged_schema_compiles():
    validator = schema_mod.compile_schema(load_default_schema())

    assert list(validator.violations({"on": "push", "jobs": {"build": {"runs-on": "ubuntu-latest"}}})) == []
    assert default_schema_path().name == "github-workflow.json"


def test_violations_are_all_reported_in_order():
    validator = schema_mod.compile_schema(PERSON_SCHEMA)

    messages = list(validator.violations({"age": "old"}))

    assert len(messages) == 2
    assert "'name' is a required property" in messages
    assert any(msg.startswith("$.age:") for msg in messages)


def test_validator_is_reusable_across_documents():
    """Repeated calls must not leak errors between documents."""

    validator = schema_mod.compile_schema(PERSON_SCHEMA)

    assert list(validator.violations({})) == ["'name' is a required property"]
    assert list(validator.violations({"name": "ok"})) == []
    assert list(validator.violations({})) == ["'name' is a required property"]


def test_schema_without_dialect_defaults_to_draft7():
    validator = schema_mod.compile_schema({"type": "object"})

    assert list(validator.violations(None)) == ["None is not of type 'object'"]


def test_known_older_dialect_is_accepted():
    """Draft-06 schemas compile without registering anything."""

    validator = schema_mod.compile_schema(
        {"$schema": "http://json-schema.org/draft-06/schema#", "type": "string"}
    )

    assert list(validator.violations("x")) == []


def test_invalid_schema_is_fatal():
    with pytest.raises(FatalSetupError, match="Invalid schema"):
        schema_mod.compile_schema({"type": "not-a-type"})


def test_unknown_meta_schema_reference_is_fatal():
    with pytest.raises(FatalSetupError, match="Unknown meta-schema"):
        schema_mod.compile_schema({"$schema": "https://example.com/no-such-meta.json", "type": "object"})


def test_non_object_schema_is_fatal():
    with pytest.raises(FatalSetupError):
        schema_mod.compile_schema(["not", "a", "schema"])


def test_registered_meta_schema_allows_custom_dialect():
    schema = {"$schema": CUSTOM_META_SCHEMA["$id"], "type": "object", "title": "thing", "required": ["id"]}

    validator = schema_mod.compile_schema(schema, [CUSTOM_META_SCHEMA])

    assert list(validator.violations({})) == ["'id' is a required property"]


def test_schema_violating_registered_meta_schema_is_fatal():
    schema = {"$schema": CUSTOM_META_SCHEMA["$id"], "type": "object"}

    with pytest.raises(FatalSetupError, match="does not satisfy meta-schema"):
        schema_mod.compile_schema(schema, [CUSTOM_META_SCHEMA])


def test_meta_schema_without_id_is_fatal():
    with pytest.raises(FatalSetupError, match=r"missing an \$id"):
        schema_mod.compile_schema({"type": "object"}, [{"type": "object"}])


def test_load_validator_reads_from_disk(tmp_path):
    schema_path = tmp_path / "schema.json"
    schema_path.write_text(json.dumps(PERSON_SCHEMA), encoding="utf-8")
    meta_path = tmp_path / "meta.json"
    meta_path.write_text(json.dumps(CUSTOM_META_SCHEMA), encoding="utf-8")

    validator = schema_mod.load_validator(schema_path, [meta_path])

    assert list(validator.violations({"name": "x"})) == []


def test_load_validator_rejects_malformed_json(tmp_path):
    schema_path = tmp_path / "schema.json"
    schema_path.write_text("{not json", encoding="utf-8")

    with pytest.raises(FatalSetupError, match="not valid JSON"):
        schema_mod.load_validator(schema_path)


def test_load_validator_rejects_missing_file(tmp_path):
    with pytest.raises(FatalSetupError, match="Cannot read schema"):
        schema_mod.load_validator(tmp_path / "missing.json")
