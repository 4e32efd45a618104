"""Exceptions raised while checking workflow files."""

from __future__ import annotations


class WorkflowCheckError(Exception):
    """Base class for all workflow check failures."""


class FilesystemError(WorkflowCheckError):
    """A directory could not be listed or a file could not be read."""

    def __init__(self, path: str, message: str) -> None:
        super().__init__(message)
        self.path = path


class ParseError(WorkflowCheckError):
    """A file's content is not syntactically valid YAML."""

    def __init__(self, path: str, message: str) -> None:
        super().__init__(message)
        self.path = path


class FatalSetupError(WorkflowCheckError):
    """The schema (or one of its meta-schemas) could not be loaded or compiled."""


class UnhandledError(WorkflowCheckError):
    """Any other failure that escaped the validation pipeline."""
