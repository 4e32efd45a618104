"""Validate workflow files against a compiled schema."""

from __future__ import annotations

from pathlib import Path

from workflow_schema_check.discovery import iter_workflow_files
from workflow_schema_check.errors import FilesystemError, ParseError
from workflow_schema_check.logging_utils import DEFAULT_LOGGER, LoggingManager
from workflow_schema_check.parsing import parse_workflow, read_workflow
from workflow_schema_check.schema import SchemaValidator
from workflow_schema_check.types import FileResult, ValidationOutcome


def check_workflow(path: str | Path, validator: SchemaValidator) -> FileResult:
    """Read, parse and schema-check one workflow file.

    A read or parse failure is recorded as the only error for the file; the
    schema is consulted only for documents that parsed. Failures inside the
    schema check itself also stay local to the file.
    """

    workflow_id = str(path)
    try:
        workflow = parse_workflow(read_workflow(path), path)
    except (FilesystemError, ParseError) as exc:
        return FileResult(id=workflow_id, errors=(str(exc),))

    try:
        errors = tuple(validator.violations(workflow))
    except Exception as exc:  # noqa: BLE001 - one bad document must not abort the run
        errors = (f"Cannot check {path} against the schema: {exc}",)
    return FileResult(id=workflow_id, errors=errors)


def check_workflows(
    folder: str | Path,
    validator: SchemaValidator,
    logger: LoggingManager = DEFAULT_LOGGER,
) -> ValidationOutcome:
    """Check every eligible file in *folder* and return only the failing ones."""

    failures: ValidationOutcome = []
    checked = 0
    for path in iter_workflow_files(folder, logger=logger):
        result = check_workflow(path, validator)
        checked += 1
        if result.ok:
            logger.debug("[OK] %s", result.id)
            continue
        logger.debug("[FAIL] %s: %d error(s)", result.id, len(result.errors))
        failures.append(result)

    logger.debug("Checked %d workflow file(s) in %s; %d failed.", checked, folder, len(failures))
    return failures
