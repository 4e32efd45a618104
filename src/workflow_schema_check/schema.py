"""Load and compile the JSON schema that workflow files must satisfy."""

from __future__ import annotations

import json
from collections.abc import Iterable, Iterator, Mapping
from pathlib import Path
from typing import Any

from jsonschema import Draft7Validator
from jsonschema.exceptions import SchemaError, best_match
from jsonschema.protocols import Validator
from jsonschema.validators import validator_for
from jsonschema_specifications import REGISTRY as SPECIFICATIONS
from referencing import Registry, Resource
from referencing.exceptions import NoSuchResource
from referencing.jsonschema import DRAFT7

from workflow_schema_check.errors import FatalSetupError


class SchemaValidator:
    """A compiled schema, reusable across any number of documents.

    Holds no per-document state: every call to :meth:`violations` walks the
    schema afresh.
    """

    def __init__(self, validator: Validator) -> None:
        self._validator = validator

    def violations(self, instance: Any) -> Iterator[str]:
        """Yield one message per schema violation, in the validator's order."""
        for error in self._validator.iter_errors(instance):
            if error.path:
                yield f"{error.json_path}: {error.message}"
            else:
                yield error.message


def load_schema_document(path: str | Path) -> Any:
    """Read a JSON schema document from disk."""

    try:
        with open(path, encoding="utf-8") as handle:
            return json.load(handle)
    except OSError as exc:
        raise FatalSetupError(f"Cannot read schema {path}: {exc.strerror or exc}") from exc
    except ValueError as exc:
        raise FatalSetupError(f"Schema {path} is not valid JSON: {exc}") from exc


def build_registry(meta_schemas: Iterable[Mapping[str, Any]] = ()) -> Registry:
    """Return a registry of the bundled specifications plus *meta_schemas*.

    Each auxiliary meta-schema must declare its URI through ``$id``.
    """

    resources: list[tuple[str, Resource]] = []
    for meta_schema in meta_schemas:
        if not isinstance(meta_schema, Mapping):
            raise FatalSetupError("Meta-schema must be a JSON object")
        resource = Resource.from_contents(meta_schema, default_specification=DRAFT7)
        uri = resource.id()
        if not uri:
            raise FatalSetupError("Meta-schema is missing an $id")
        resources.append((uri.rstrip("#"), resource))
    return SPECIFICATIONS.with_resources(resources)


def compile_schema(
    schema: Mapping[str, Any] | bool,
    meta_schemas: Iterable[Mapping[str, Any]] = (),
) -> SchemaValidator:
    """Register *meta_schemas* and compile *schema* into a :class:`SchemaValidator`.

    Raises :class:`FatalSetupError` when a meta-schema cannot be registered,
    when ``$schema`` names an unknown meta-schema, or when *schema* is not
    valid against its meta-schema.
    """

    if not isinstance(schema, (Mapping, bool)):
        raise FatalSetupError(f"Schema must be an object or boolean, got {type(schema).__name__}")

    try:
        registry = build_registry(meta_schemas)
        cls = _validator_class(schema, registry)
        cls.check_schema(schema)
        return SchemaValidator(cls(schema, registry=registry))
    except FatalSetupError:
        raise
    except NoSuchResource as exc:
        raise FatalSetupError(f"Unknown meta-schema {exc.ref}") from exc
    except SchemaError as exc:
        raise FatalSetupError(f"Invalid schema: {exc.message}") from exc
    except Exception as exc:  # noqa: BLE001 - any compile failure is fatal to the run
        raise FatalSetupError(f"Cannot compile schema: {exc}") from exc


def _validator_class(schema: Mapping[str, Any] | bool, registry: Registry) -> type[Validator]:
    """Pick the validator class for *schema*."""

    if not isinstance(schema, Mapping) or "$schema" not in schema:
        return Draft7Validator

    known = validator_for(schema, default=None)
    if known is not None:
        return known

    # Custom meta-schema: it must be registered, and its own dialect decides
    # which validator class compiles the schema.
    meta_schema = registry.contents(str(schema["$schema"]).rstrip("#"))
    cls = validator_for(meta_schema, default=Draft7Validator)
    error = best_match(cls(meta_schema, registry=registry).iter_errors(schema))
    if error is not None:
        raise FatalSetupError(f"Schema does not satisfy meta-schema {schema['$schema']}: {error.message}")
    return cls


def load_validator(
    schema_path: str | Path,
    meta_schema_paths: Iterable[str | Path] = (),
) -> SchemaValidator:
    """Load a schema and its auxiliary meta-schemas from disk and compile them."""

    meta_schemas = [load_schema_document(path) for path in meta_schema_paths]
    return compile_schema(load_schema_document(schema_path), meta_schemas)
