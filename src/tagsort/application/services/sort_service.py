"""Application service for reconciling a music collection.

This layer centralizes orchestration and construction of feature objects
so the CLI only translates arguments and renders results.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import final

from tagsort.config.settings import TranscodeSettings, transcode_settings
from tagsort.features.sorting import FileSorter, SortMode, SortRequest, SortResult
from tagsort.features.tags import MutagenTagCodec, TagCodecPort
from tagsort.features.transcode import (
    EncoderPort,
    FfmpegEncoder,
    TranscodePipeline,
    TranscodeResult,
)
from tagsort.platform.filesystem import remove_empty_directories
from tagsort.platform.logging import logger
from tagsort.shared.events import ProcessingEvent


@dataclass(frozen=True)
class SortLibraryRequest:
    """Input parameters for one reconciliation run.

    Attributes:
        base_path: Collection root.
        mode: Which side is authoritative for the sort pass.
        dry_run: If True, performs no file mutations in any pass.
        prune_empty: Remove empty directories after the sort pass.
        transcode: Run the lossless transcode pass afterwards.
        workers: Override for the configured transcode concurrency.
        bitrate: Override for the configured transcode bitrate.
    """

    base_path: Path
    mode: SortMode = SortMode.TAGS_FROM_PATH
    dry_run: bool = False
    prune_empty: bool = True
    transcode: bool = False
    workers: int | None = None
    bitrate: str | None = None


@dataclass
class SortLibraryReport:
    """Everything a run did, pass by pass."""

    sort_results: list[SortResult] = field(default_factory=list)
    pruned_directories: list[Path] = field(default_factory=list)
    transcode_results: list[TranscodeResult] = field(default_factory=list)

    @property
    def has_failures(self) -> bool:
        return any(not result.success for result in self.sort_results) or any(
            not result.success for result in self.transcode_results
        )


@final
class SortLibraryService:
    """Application service that runs the sort, prune and transcode passes."""

    def __init__(
        self,
        *,
        codec_factory: Callable[[], TagCodecPort] | None = None,
        encoder_factory: Callable[[str], EncoderPort] | None = None,
        settings_factory: Callable[[], TranscodeSettings] | None = None,
    ) -> None:
        """Create a service with overridable collaborators.

        Tests inject in-memory codecs and encoders; production relies on
        mutagen and ffmpeg.
        """
        self._codec_factory: Callable[[], TagCodecPort] = codec_factory or MutagenTagCodec
        self._encoder_factory: Callable[[str], EncoderPort] = encoder_factory or FfmpegEncoder
        self._settings_factory: Callable[[], TranscodeSettings] = (
            settings_factory or transcode_settings
        )

    def run(
        self,
        request: SortLibraryRequest,
        on_result: Callable[[SortResult], None] | None = None,
    ) -> SortLibraryReport:
        """Run every pass the request enables, in order.

        Raises:
            NotADirectoryError: If the collection root is missing.
        """
        if not request.base_path.is_dir():
            raise NotADirectoryError(f"Not a directory: {request.base_path}")

        report = SortLibraryReport()
        report.sort_results = self.sort(request, on_result)
        if request.prune_empty:
            report.pruned_directories = self.prune(request)
        if request.transcode:
            report.transcode_results = self.transcode(request)
        return report

    def sort(
        self,
        request: SortLibraryRequest,
        on_result: Callable[[SortResult], None] | None = None,
    ) -> list[SortResult]:
        sorter = FileSorter(
            SortRequest(base_path=request.base_path, mode=request.mode, dry_run=request.dry_run),
            codec=self._codec_factory(),
            on_result=on_result,
        )
        return sorter.run()

    def prune(self, request: SortLibraryRequest) -> list[Path]:
        removed = remove_empty_directories(request.base_path, dry_run=request.dry_run)
        for directory in removed:
            logger.info(
                "%s empty directory %s",
                "Would remove" if request.dry_run else "Removed",
                directory,
                extra={
                    "processing_event": ProcessingEvent.PRUNE_DIRECTORY,
                    "source_path": directory,
                    "base_path": request.base_path,
                },
            )
        return removed

    def transcode(self, request: SortLibraryRequest) -> list[TranscodeResult]:
        settings = self._settings_factory()
        transcode_request = settings.to_request(request.base_path, dry_run=request.dry_run)
        if request.workers is not None:
            transcode_request = replace(transcode_request, workers=request.workers)
        if request.bitrate:
            transcode_request = replace(transcode_request, bitrate=request.bitrate)
        pipeline = TranscodePipeline(
            transcode_request,
            encoder=self._encoder_factory(settings.encoder_binary),
        )
        return pipeline.run()


__all__ = ["SortLibraryReport", "SortLibraryRequest", "SortLibraryService"]
