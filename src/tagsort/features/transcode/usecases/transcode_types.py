"""Shared request and result types for the transcode pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path

DEFAULT_WORKERS = 18
DEFAULT_BITRATE = "320k"
DEFAULT_LOSSLESS_EXTENSIONS: tuple[str, ...] = (".flac", ".m4a")
DEFAULT_COMPRESSED_EXTENSION = ".mp3"


class TranscodeOutcome(StrEnum):
    """Terminal state of one lossless file."""

    PLANNED = "planned"
    CONVERTED = "converted"
    ENCODE_FAILED = "encode_failed"
    DELETE_FAILED = "delete_failed"


@dataclass(frozen=True, slots=True)
class TranscodeRequest:
    """Immutable configuration for one transcode pass."""

    base_path: Path
    dry_run: bool = False
    workers: int = DEFAULT_WORKERS
    bitrate: str = DEFAULT_BITRATE
    lossless_extensions: tuple[str, ...] = DEFAULT_LOSSLESS_EXTENSIONS
    compressed_extension: str = DEFAULT_COMPRESSED_EXTENSION

    def __post_init__(self) -> None:
        if self.workers < 1:
            raise ValueError(f"workers must be a positive integer, got {self.workers}")


@dataclass(slots=True)
class TranscodeResult:
    """Outcome of transcoding a single file."""

    source_path: Path
    target_path: Path
    outcome: TranscodeOutcome
    error_message: str | None = None

    @property
    def success(self) -> bool:
        return self.outcome in {TranscodeOutcome.PLANNED, TranscodeOutcome.CONVERTED}


__all__ = [
    "DEFAULT_BITRATE",
    "DEFAULT_COMPRESSED_EXTENSION",
    "DEFAULT_LOSSLESS_EXTENSIONS",
    "DEFAULT_WORKERS",
    "TranscodeOutcome",
    "TranscodeRequest",
    "TranscodeResult",
]
