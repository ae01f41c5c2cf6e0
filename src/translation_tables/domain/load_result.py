from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class LoadStatus(Enum):
    """Outcome of loading one translation source."""

    LOADED = "loaded"
    RECOVERED = "recovered"  # read from a temporary copy
    MISSING = "missing"
    FAILED = "failed"

    def __str__(self):
        return self.value


@dataclass(slots=True)
class MergeStats:
    added: int = 0
    updated: int = 0
    skipped_rows: int = 0


@dataclass(frozen=True, slots=True)
class LoadResult:
    source: str
    status: LoadStatus
    added: int = 0
    updated: int = 0
    skipped_rows: int = 0
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status is not LoadStatus.FAILED

    @classmethod
    def from_stats(cls, source: str, status: LoadStatus, stats: MergeStats) -> LoadResult:
        return cls(
            source=source,
            status=status,
            added=stats.added,
            updated=stats.updated,
            skipped_rows=stats.skipped_rows,
        )
