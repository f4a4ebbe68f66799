"""Application-layer result objects."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from tomltojson.types import OutcomeStatus


@dataclass(frozen=True)
class ConversionOutcome:
    """Result for a single source document (or unreadable directory)."""

    source_path: Path
    target_path: Path | None
    status: OutcomeStatus
    reason: str | None = None
    bytes_read: int = 0


@dataclass(frozen=True)
class ConversionReport:
    """Structured outcome of one conversion run."""

    outcomes: tuple[ConversionOutcome, ...] = ()

    @property
    def converted(self) -> int:
        """Number of documents written."""
        return sum(1 for outcome in self.outcomes if outcome.status == "converted")

    @property
    def skipped(self) -> int:
        """Number of documents skipped as too old."""
        return sum(1 for outcome in self.outcomes if outcome.status == "skipped_stale")

    @property
    def failures(self) -> tuple[ConversionOutcome, ...]:
        """Failed outcomes, in traversal order."""
        return tuple(outcome for outcome in self.outcomes if outcome.status == "failed")

    @property
    def ok(self) -> bool:
        """``True`` when nothing failed."""
        return not self.failures
