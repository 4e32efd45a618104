"""Surface validation results to a human or to the CI host."""

from __future__ import annotations

import enum
import os
import sys
from collections.abc import Mapping
from typing import Protocol, TextIO

from rich.console import Console
from rich.markup import escape


class Reporter(Protocol):
    """Sink accepting grouped log lines and a failure signal."""

    def start_group(self, title: str) -> None: ...

    def end_group(self) -> None: ...

    def error(self, message: str) -> None: ...

    def info(self, message: str) -> None: ...

    def set_failed(self, message: str) -> None: ...


class ConsoleReporter:
    """Render results on a terminal with rich."""

    def __init__(self, console: Console | None = None, err_console: Console | None = None) -> None:
        self.console = console or Console()
        self.err_console = err_console or Console(stderr=True)
        self.failed = False

    def start_group(self, title: str) -> None:
        self.console.rule(escape(title), align="left")

    def end_group(self) -> None:
        self.console.rule()

    def error(self, message: str) -> None:
        self.err_console.print(f"[bold red]error[/]: {escape(message)}", soft_wrap=True)

    def info(self, message: str) -> None:
        self.console.print(escape(message), soft_wrap=True)

    def set_failed(self, message: str) -> None:
        self.failed = True
        self.err_console.print(f"[bold red]FAILED[/]: {escape(message)}", soft_wrap=True)


def _escape_data(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


class GitHubActionsReporter:
    """Emit GitHub Actions workflow commands so results show up as annotations."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream or sys.stdout
        self.failed = False

    def _command(self, name: str, message: str) -> None:
        print(f"::{name}::{_escape_data(message)}", file=self.stream)

    def start_group(self, title: str) -> None:
        self._command("group", title)

    def end_group(self) -> None:
        self._command("endgroup", "")

    def error(self, message: str) -> None:
        self._command("error", message)

    def info(self, message: str) -> None:
        print(message, file=self.stream)

    def set_failed(self, message: str) -> None:
        self.failed = True
        self._command("error", message)


class ReporterKind(enum.Enum):
    AUTO = "auto"
    CONSOLE = "console"
    GITHUB = "github"


def running_in_github_actions(environ: Mapping[str, str] | None = None) -> bool:
    """Return True when the GitHub Actions runner set ``GITHUB_ACTIONS``."""

    env = os.environ if environ is None else environ
    return env.get("GITHUB_ACTIONS", "").lower() == "true"


def make_reporter(kind: ReporterKind = ReporterKind.AUTO, environ: Mapping[str, str] | None = None) -> Reporter:
    """Build the reporter for *kind*, resolving ``auto`` from the environment."""

    if kind is ReporterKind.AUTO:
        kind = ReporterKind.GITHUB if running_in_github_actions(environ) else ReporterKind.CONSOLE
    if kind is ReporterKind.GITHUB:
        return GitHubActionsReporter()
    return ConsoleReporter()
