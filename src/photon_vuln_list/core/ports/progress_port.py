from __future__ import annotations

from typing import Protocol


class ProgressPort(Protocol):
    def start(self, total: int, desc: str | None = None) -> None:
        """Begin tracking a unit of work made of total steps."""

    def advance(self, n: int = 1) -> None:
        """Mark n steps as done."""

    def finish(self) -> None:
        """Close the current unit of work."""
