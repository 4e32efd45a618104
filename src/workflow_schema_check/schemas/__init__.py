"""Packaged JSON schemas for workflow files.

``github-workflow.json`` describes the overall shape of a GitHub Actions
workflow: triggers, jobs and steps. It is deliberately structural and does not
try to enumerate every event filter.
"""

from __future__ import annotations

import json
from importlib import resources
from pathlib import Path
from typing import Any

DEFAULT_SCHEMA_NAME = "github-workflow.json"


def default_schema_path() -> Path:
    """Return a filesystem path to the packaged workflow schema."""

    return Path(str(resources.files(__name__).joinpath(DEFAULT_SCHEMA_NAME)))


def load_default_schema() -> dict[str, Any]:
    """Return the packaged workflow schema as a dictionary."""

    schema_resource = resources.files(__name__).joinpath(DEFAULT_SCHEMA_NAME)
    with schema_resource.open("r", encoding="utf-8") as handle:
        return json.load(handle)
