"""Where: src/tagsort/config/settings.py
What: Derived runtime settings sourced from persisted configuration.
Why: Expose validated values to the application layer without repeating checks.
Assumptions: - Config defaults remain compatible with current runtime expectations.
Trade-offs: - Validation is limited to simple boundary checks.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from tagsort.config.config import Config
from tagsort.features.transcode import TranscodeRequest
from tagsort.features.transcode.usecases.transcode_types import (
    DEFAULT_BITRATE,
    DEFAULT_COMPRESSED_EXTENSION,
    DEFAULT_LOSSLESS_EXTENSIONS,
    DEFAULT_WORKERS,
)


@dataclass(frozen=True, slots=True)
class TranscodeSettings:
    """Validated transcode settings."""

    workers: int
    bitrate: str
    encoder_binary: str
    lossless_extensions: tuple[str, ...]
    compressed_extension: str

    def to_request(self, base_path: Path, *, dry_run: bool) -> TranscodeRequest:
        return TranscodeRequest(
            base_path=base_path,
            dry_run=dry_run,
            workers=self.workers,
            bitrate=self.bitrate,
            lossless_extensions=self.lossless_extensions,
            compressed_extension=self.compressed_extension,
        )


def _normalize_extension(extension: str) -> str:
    extension = extension.strip().lower()
    if not extension:
        return ""
    return extension if extension.startswith(".") else f".{extension}"


def transcode_settings(config: Config | None = None) -> TranscodeSettings:
    """Build validated transcode settings from ``config`` (or the loaded config)."""

    app_config = config or Config.load()

    workers = app_config.transcode_workers
    if not isinstance(workers, int) or isinstance(workers, bool) or workers <= 0:
        workers = DEFAULT_WORKERS

    lossless = tuple(
        ext for ext in (_normalize_extension(str(raw)) for raw in app_config.lossless_extensions) if ext
    )
    compressed = _normalize_extension(app_config.compressed_extension) or DEFAULT_COMPRESSED_EXTENSION

    return TranscodeSettings(
        workers=workers,
        bitrate=app_config.transcode_bitrate.strip() or DEFAULT_BITRATE,
        encoder_binary=app_config.encoder_binary.strip() or "ffmpeg",
        lossless_extensions=lossless or DEFAULT_LOSSLESS_EXTENSIONS,
        compressed_extension=compressed,
    )


__all__ = ["TranscodeSettings", "transcode_settings"]
