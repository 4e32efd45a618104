"""Locate candidate workflow files inside a single directory."""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

from workflow_schema_check.errors import FilesystemError
from workflow_schema_check.logging_utils import DEFAULT_LOGGER, LoggingManager

# Files starting with this prefix hold shared fragments, not workflows.
RESERVED_PREFIX = "_"


def iter_workflow_files(folder: str | Path, logger: LoggingManager = DEFAULT_LOGGER) -> Iterator[Path]:
    """Yield regular files in *folder* whose names do not start with ``_``.

    The directory is listed once up front so a missing or unreadable folder
    raises :class:`FilesystemError` before anything is yielded. Entries come
    back sorted by name to keep reports reproducible.
    """

    folder = Path(folder)
    try:
        with os.scandir(folder) as entries:
            listing = sorted(entries, key=lambda entry: entry.name)
    except OSError as exc:
        raise FilesystemError(str(folder), f"Cannot list {folder}: {exc.strerror or exc}") from exc

    def _generate() -> Iterator[Path]:
        for entry in listing:
            if entry.name.startswith(RESERVED_PREFIX):
                logger.debug("[SKIP] %s (reserved prefix)", entry.path)
                continue
            try:
                is_file = entry.is_file()
            except OSError:
                is_file = False
            if not is_file:
                logger.debug("[SKIP] %s (not a regular file)", entry.path)
                continue
            yield Path(entry.path)

    return _generate()


def discover_workflow_files(folder: str | Path, logger: LoggingManager = DEFAULT_LOGGER) -> list[Path]:
    """Return the list of eligible workflow files in *folder*."""

    return list(iter_workflow_files(folder, logger=logger))
