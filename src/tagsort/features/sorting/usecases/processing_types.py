"""src/tagsort/features/sorting/usecases/processing_types.py
Where: Sorting feature usecases layer.
What: Shared enums and dataclasses for the per-file sort flow.
Why: Keep the sorter lean by centralising type definitions.
"""

from __future__ import annotations

import time
from collections import Counter
from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path
from typing import Any

from tagsort.shared.tag_set import TagSet


class SortMode(StrEnum):
    """Which side of a file is authoritative."""

    # rewrite tags so they match the directory layout
    TAGS_FROM_PATH = "tags-from-path"
    # move files so the directory layout matches their tags
    PATH_FROM_TAGS = "path-from-tags"


class SortOutcome(StrEnum):
    """Terminal state of one file in a sort pass."""

    SKIPPED = "skipped"
    UNCHANGED = "unchanged"
    PREVIEWED = "previewed"
    TAGS_REWRITTEN = "tags_rewritten"
    TAGS_FAILED = "tags_failed"
    MOVED = "moved"
    MOVE_FAILED = "move_failed"

    @property
    def failed(self) -> bool:
        return self in {SortOutcome.TAGS_FAILED, SortOutcome.MOVE_FAILED}


@dataclass(frozen=True, slots=True)
class SortRequest:
    """Immutable configuration for one sort pass.

    Attributes:
        base_path: Collection root.
        mode: Which side is authoritative.
        dry_run: If True, inconsistent files are only previewed.
    """

    base_path: Path
    mode: SortMode = SortMode.TAGS_FROM_PATH
    dry_run: bool = False


@dataclass(frozen=True, slots=True)
class FilePreview:
    """Human-diffable description of an inconsistent file."""

    real_path: Path
    path_from_tags: Path
    old_tags: TagSet
    new_tags: TagSet


@dataclass
class SortResult:
    """Result of classifying (and possibly acting on) one walked file."""

    relative_path: Path
    outcome: SortOutcome
    preview: FilePreview | None = None
    target_path: Path | None = None
    error_message: str | None = None
    warnings: list[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return not self.outcome.failed


@dataclass(slots=True)
class SortLogContext:
    """Mutable bookkeeping for a sort run."""

    base_path: Path
    mode: SortMode
    dry_run: bool
    start_time: float = field(default_factory=time.perf_counter)
    outcomes: Counter[SortOutcome] = field(default_factory=Counter)

    def record(self, result: SortResult) -> None:
        self.outcomes[result.outcome] += 1

    def duration_seconds(self) -> float:
        """Return the elapsed processing time in seconds."""

        return time.perf_counter() - self.start_time

    def summary_extra(self) -> dict[str, Any]:
        """Return a dictionary suitable for structured logging extras."""

        metrics: dict[str, object] = {"mode": self.mode.value}
        for outcome in SortOutcome:
            metrics[outcome.value] = self.outcomes[outcome]
        metrics["dry-run"] = self.dry_run
        metrics["duration"] = round(self.duration_seconds(), 4)
        return {"directory": str(self.base_path), "metrics": metrics}


__all__ = [
    "FilePreview",
    "SortLogContext",
    "SortMode",
    "SortOutcome",
    "SortRequest",
    "SortResult",
]
