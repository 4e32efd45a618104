from __future__ import annotations

import sys
from pathlib import Path


def _ensure_package_on_path() -> None:
    """Insert the source root into ``sys.path`` when run as a script.

    Direct ``python __main__.py`` execution puts this file's directory at the
    top of ``sys.path`` instead of its parent, so absolute imports of
    ``workflow_schema_check`` would fail without this.
    """

    package_dir = Path(__file__).resolve().parent
    source_root = str(package_dir.parent)
    if source_root not in sys.path:
        sys.path.insert(0, source_root)


def _load_app():
    _ensure_package_on_path()
    from workflow_schema_check.cli import app as cli_app

    return cli_app


app = _load_app()


def main() -> None:
    """Entrypoint for running the CLI application."""

    app(prog_name="workflow-schema-check")


if __name__ == "__main__":
    main()
