"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import final

from tagsort.features.sorting import SortMode


@final
@dataclass(slots=True)
class SortArgs:
    """Parsed and validated command line arguments."""

    music_path: Path
    mode: SortMode
    dry_run: bool
    prune_empty: bool
    transcode: bool
    workers: int | None
    bitrate: str | None
    verbose: bool
    quiet: bool


__all__ = ["SortArgs"]
