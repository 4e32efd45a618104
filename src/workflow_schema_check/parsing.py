"""Read workflow files and parse them as YAML."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any

import yaml
from yaml import YAMLError

from workflow_schema_check.errors import FilesystemError, ParseError

_BOOL_TAG = "tag:yaml.org,2002:bool"


class WorkflowLoader(yaml.SafeLoader):
    """SafeLoader that only treats ``true``/``false`` as booleans.

    PyYAML follows YAML 1.1, where ``on``, ``off``, ``yes`` and ``no`` are
    booleans too. Workflow files rely on an ``on`` key, so those stay strings
    as they would under YAML 1.2.
    """


WorkflowLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != _BOOL_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
WorkflowLoader.add_implicit_resolver(
    _BOOL_TAG,
    re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"),
    list("tTfF"),
)


def read_workflow(path: str | Path) -> str:
    """Return the full UTF-8 text of *path*."""

    try:
        with open(path, encoding="utf-8") as handle:
            return handle.read()
    except UnicodeDecodeError as exc:
        raise FilesystemError(str(path), f"{path} is not valid UTF-8 text: {exc.reason}") from exc
    except OSError as exc:
        raise FilesystemError(str(path), f"Cannot read {path}: {exc.strerror or exc}") from exc


def _json_key(key: Any) -> str:
    if isinstance(key, bool):
        return "true" if key else "false"
    if key is None:
        return "null"
    return str(key)


def _with_string_keys(value: Any) -> Any:
    """Return *value* with every mapping key converted to ``str`` as JSON would."""

    if isinstance(value, dict):
        return {_json_key(key): _with_string_keys(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_with_string_keys(item) for item in value]
    return value


def parse_workflow(text: str, path: str | Path = "<string>") -> Any:
    """Parse a single YAML document; an empty document yields ``None``.

    Mapping keys always come back as strings (``1:`` becomes ``"1"``), so the
    result can be checked against a JSON schema.
    """

    try:
        document = yaml.load(text, Loader=WorkflowLoader)  # noqa: S506 - SafeLoader subclass
    except YAMLError as exc:
        raise ParseError(str(path), " ".join(str(exc).split())) from exc
    except (ValueError, OverflowError) as exc:
        # Scalars matching an implicit tag but out of range, e.g. 2020-13-45.
        raise ParseError(str(path), f"Invalid value in {path}: {exc}") from exc
    return _with_string_keys(document)


def load_workflow(path: str | Path) -> Any:
    """Read and parse *path* in one step."""

    return parse_workflow(read_workflow(path), path)
