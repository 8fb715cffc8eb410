"""Data types for the preamble injector."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

ADDED = "added"
SKIPPED = "skipped"
ERROR = "error"


@dataclass
class FileOutcome:
    """What happened to one eligible file."""

    path: Path
    status: str             # ADDED, SKIPPED or ERROR
    error: str | None = None


@dataclass
class InjectReport:
    """Ordered per-file outcomes of one `add` run."""

    outcomes: list[FileOutcome] = field(default_factory=list)
    missing_roots: list[str] = field(default_factory=list)

    def _count(self, status: str) -> int:
        return sum(1 for o in self.outcomes if o.status == status)

    @property
    def added(self) -> int:
        return self._count(ADDED)

    @property
    def skipped(self) -> int:
        return self._count(SKIPPED)

    @property
    def failed(self) -> int:
        return self._count(ERROR)

    @property
    def errors(self) -> list[FileOutcome]:
        return [o for o in self.outcomes if o.status == ERROR]

    @property
    def ok(self) -> bool:
        return self.failed == 0
