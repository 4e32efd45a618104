"""Console entrypoint for the workflow schema checker."""

from pathlib import Path

import typer

from workflow_schema_check.logging_utils import DEFAULT_LOGGER
from workflow_schema_check.reporting import ReporterKind, make_reporter
from workflow_schema_check.runner import DEFAULT_WORKFLOW_DIR, WorkflowCheckApp


class WorkflowCheckCLI:
    """Object-oriented wrapper for the Typer command-line interface."""

    def __init__(self) -> None:
        self.logger = DEFAULT_LOGGER
        self.app = typer.Typer(help="Validate workflow YAML files against a JSON schema.")
        self.app.command()(self._check)

    def _check(
        self,
        path: Path = typer.Option(
            DEFAULT_WORKFLOW_DIR,
            "--path",
            "-p",
            help="Directory holding the workflow files (default: .github/workflows).",
        ),
        schema: Path | None = typer.Option(
            None,
            "--schema",
            "-s",
            help="JSON schema to validate against (default: packaged GitHub workflow schema).",
        ),
        meta_schema: list[Path] = typer.Option(
            [],
            "--meta-schema",
            "-m",
            help="Auxiliary meta-schema to register before compiling (repeatable).",
        ),
        reporter: ReporterKind = typer.Option(
            ReporterKind.AUTO,
            "--reporter",
            "-r",
            case_sensitive=False,
            help="Output format: auto, console or github (auto uses github on GitHub Actions).",
        ),
        verbose: bool = typer.Option(
            False,
            "--verbose",
            help="Enable verbose debug logging.",
        ),
    ) -> None:
        """Check every workflow file in a directory and exit non-zero on errors."""

        self.logger.setup(verbose)
        exit_code = WorkflowCheckApp(
            folder=path,
            schema_path=schema,
            meta_schema_paths=meta_schema,
            reporter=make_reporter(reporter),
            logger=self.logger,
        ).run()
        raise typer.Exit(code=exit_code)

    def run(self) -> None:
        """Invoke the Typer application."""
        self.app()


cli = WorkflowCheckCLI()
app = cli.app


if __name__ == "__main__":
    cli.run()
