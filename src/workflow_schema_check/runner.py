"""Top-level control flow for a workflow check run."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from workflow_schema_check.errors import UnhandledError
from workflow_schema_check.logging_utils import DEFAULT_LOGGER, LoggingManager
from workflow_schema_check.reporting import Reporter, make_reporter
from workflow_schema_check.schema import load_validator
from workflow_schema_check.schemas import default_schema_path
from workflow_schema_check.types import ValidationOutcome
from workflow_schema_check.validation import check_workflows

DEFAULT_WORKFLOW_DIR = Path(".github") / "workflows"


class WorkflowCheckApp:
    """Compile the schema, check one directory and report the outcome."""

    def __init__(
        self,
        folder: str | Path = DEFAULT_WORKFLOW_DIR,
        schema_path: str | Path | None = None,
        meta_schema_paths: Sequence[str | Path] = (),
        reporter: Reporter | None = None,
        logger: LoggingManager = DEFAULT_LOGGER,
    ) -> None:
        self.folder = Path(folder)
        self.schema_path = Path(schema_path) if schema_path else None
        self.meta_schema_paths = list(meta_schema_paths)
        self.reporter = reporter or make_reporter()
        self.logger = logger

    def run(self) -> int:
        """Return 0 when every workflow passed, 1 otherwise."""
        try:
            outcome = self._check()
        except Exception as exc:  # noqa: BLE001 - outermost boundary for the run
            error = UnhandledError(str(exc))
            error.__cause__ = exc
            self._report_unhandled(error)
            return 1

        return self._report(outcome)

    def _check(self) -> ValidationOutcome:
        schema_path = self.schema_path or default_schema_path()
        self.logger.debug("Compiling schema %s", schema_path)
        validator = load_validator(schema_path, self.meta_schema_paths)
        self.logger.log("Checking workflows in %s", self.folder)
        return check_workflows(self.folder, validator, logger=self.logger)

    def _report(self, outcome: ValidationOutcome) -> int:
        if not outcome:
            self.reporter.info("Found no workflows with errors!")
            return 0

        self.reporter.start_group(f"Found {len(outcome)} workflows with errors:")
        for result in outcome:
            self.reporter.error(result.summary())
        self.reporter.end_group()
        self.reporter.set_failed(f"Found {len(outcome)} workflows with errors")
        return 1

    def _report_unhandled(self, error: UnhandledError) -> None:
        cause = error.__cause__
        self.logger.error("[ERROR] %s: %s", type(cause).__name__, error)
        self.reporter.error(f"Unhandled error while validating workflows: {error}")
        self.reporter.set_failed("Unhandled error")


def run_check(
    folder: str | Path = DEFAULT_WORKFLOW_DIR,
    schema_path: str | Path | None = None,
    meta_schema_paths: Sequence[str | Path] = (),
    reporter: Reporter | None = None,
    logger: LoggingManager = DEFAULT_LOGGER,
) -> int:
    """Convenience wrapper building and running a :class:`WorkflowCheckApp`."""

    return WorkflowCheckApp(
        folder=folder,
        schema_path=schema_path,
        meta_schema_paths=meta_schema_paths,
        reporter=reporter,
        logger=logger,
    ).run()
