"""Shared dataclasses describing validation results."""

from __future__ import annotations

import dataclasses


@dataclasses.dataclass(frozen=True)
class FileResult:
    """Validation record for a single workflow file."""

    id: str
    name: str | None = None
    errors: tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.errors

    def summary(self) -> str:
        """Return the single report line for this file."""
        return f"Errors in {self.id} - {', '.join(self.errors)}"


# Failing results only, in discovery order.
ValidationOutcome = list[FileResult]
