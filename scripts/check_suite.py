#!/usr/bin/env python3
"""Run lint, format and test checks for the repository in sequence.

Every step runs even if an earlier one fails; the exit status reflects all of them.
"""

from __future__ import annotations

import subprocess
import sys
from typing import Final

Step = tuple[str, list[str]]

STEPS: Final[list[Step]] = [
    ("ruff check", ["ruff", "check", "src", "tests", "scripts"]),
    ("ruff format --check", ["ruff", "format", "--check", "src", "tests", "scripts"]),
    ("pytest", [sys.executable, "-m", "pytest", "-q"]),
]


def run_step(label: str, command: list[str]) -> int:
    """Execute one step and report how it went."""
    print(f"==> {label}")
    result = subprocess.run(command, check=False)
    if result.returncode != 0:
        print(f"{label} failed (exit code {result.returncode}).")
    return result.returncode


def main() -> None:
    failed = [label for label, command in STEPS if run_step(label, command) != 0]

    if failed:
        print(f"\n{len(failed)} of {len(STEPS)} steps failed: {', '.join(failed)}")
        raise SystemExit(1)

    print(f"\nAll {len(STEPS)} steps passed.")


if __name__ == "__main__":
    main()
