"""Reusable test utilities and recording stubs for the test suite."""

from pathlib import Path

VALID_WORKFLOW = """\
name: CI
on: [push, pull_request]
jobs:
  build:
    runs-on: ubuntu-latest
    steps:
      - uses: actions/checkout@v4
      - run: make test
"""

MISSING_JOBS_WORKFLOW = """\
name: Broken
on: push
"""

INVALID_YAML = "jobs: [unterminated\n  - nope: : :\n"


def write_files(folder: Path, files: dict[str, str]) -> Path:
    """Create *files* (name -> content) inside *folder* and return it."""
    folder.mkdir(parents=True, exist_ok=True)
    for name, content in files.items():
        (folder / name).write_text(content, encoding="utf-8")
    return folder


class RecordingLogger:
    """In-memory logger capturing log messages and setup calls."""

    def __init__(self):
        self.messages: list[str] = []
        self.setup_calls: list[bool] = []

    def setup(self, verbose: bool) -> None:
        self.setup_calls.append(verbose)

    def log(self, msg: str, *args) -> None:
        self.messages.append(msg % args if args else msg)

    def debug(self, msg: str, *args) -> None:
        self.messages.append("DEBUG:" + (msg % args if args else msg))

    def error(self, msg: str, *args) -> None:
        self.messages.append("ERROR:" + (msg % args if args else msg))


class RecordingReporter:
    """Reporter capturing every call as a (kind, message) tuple."""

    def __init__(self):
        self.events: list[tuple[str, str]] = []

    def start_group(self, title: str) -> None:
        self.events.append(("start_group", title))

    def end_group(self) -> None:
        self.events.append(("end_group", ""))

    def error(self, message: str) -> None:
        self.events.append(("error", message))

    def info(self, message: str) -> None:
        self.events.append(("info", message))

    def set_failed(self, message: str) -> None:
        self.events.append(("set_failed", message))

    def of_kind(self, kind: str) -> list[str]:
        return [message for event, message in self.events if event == kind]

    @property
    def failed(self) -> bool:
        return bool(self.of_kind("set_failed"))
