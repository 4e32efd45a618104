"""Logging helpers for the workflow schema checker."""

from __future__ import annotations

import logging
import sys


class LoggingManager:
    """Manage logging configuration and messages for a check run."""

    def __init__(self, logger_name: str = "workflow_schema_check") -> None:
        self.logger = logging.getLogger(logger_name)
        self.logger.propagate = False

    def setup(self, verbose: bool) -> None:
        """Configure logging to stderr."""
        level = logging.DEBUG if verbose else logging.INFO

        formatter = logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
        console = logging.StreamHandler(sys.stderr)
        console.setFormatter(formatter)

        self.logger.handlers.clear()
        self.logger.addHandler(console)
        self.logger.setLevel(level)

    def log(self, msg: str, *args: object) -> None:
        """Log an informational message."""
        self.logger.info(msg, *args)

    def debug(self, msg: str, *args: object) -> None:
        """Log a debug message."""
        self.logger.debug(msg, *args)

    def error(self, msg: str, *args: object) -> None:
        """Log an error message."""
        self.logger.error(msg, *args)


DEFAULT_LOGGER = LoggingManager()
