"""Summary: Bounded-concurrency conversion of lossless files to a compressed format.
Why: Encoding is CPU bound, so a fixed pool caps peak load regardless of collection size."""

from __future__ import annotations

import time
from collections import Counter
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from tagsort.platform.filesystem import walk_files
from tagsort.platform.logging import logger
from tagsort.shared.errors import EncodeError
from tagsort.shared.events import ProcessingEvent

from .ports import EncoderPort
from .transcode_types import TranscodeOutcome, TranscodeRequest, TranscodeResult


class TranscodePipeline:
    """Convert every lossless file under a root, deleting sources on success.

    At most ``request.workers`` encoder invocations run at once. ``run``
    returns only after every invocation has finished. Failed files keep
    their source; nothing is retried.
    """

    request: TranscodeRequest

    def __init__(self, request: TranscodeRequest, *, encoder: EncoderPort) -> None:
        self.request = request
        self._encoder: EncoderPort = encoder

    def find_lossless(self) -> list[Path]:
        """Collect lossless files in walk order."""

        extensions = {extension.lower() for extension in self.request.lossless_extensions}
        return [path for path in walk_files(self.request.base_path) if path.suffix.lower() in extensions]

    def target_for(self, source: Path) -> Path:
        return source.with_suffix(self.request.compressed_extension)

    def run(self) -> list[TranscodeResult]:
        """Transcode every lossless file and wait for all of them.

        Raises:
            NotADirectoryError: If the root does not exist or is not a directory.
        """
        base_path = self.request.base_path
        if not base_path.is_dir():
            raise NotADirectoryError(f"Not a directory: {base_path}")

        start = time.perf_counter()
        sources = self.find_lossless()
        logger.info(
            "Transcode started: files=%d, workers=%d, dry_run=%s, path=%s",
            len(sources),
            self.request.workers,
            self.request.dry_run,
            base_path,
            extra={
                "processing_event": ProcessingEvent.TRANSCODE_START,
                "directory": str(base_path),
                "metrics": {
                    "files": len(sources),
                    "workers": self.request.workers,
                    "bitrate": self.request.bitrate,
                    "dry-run": self.request.dry_run,
                },
            },
        )

        if self.request.dry_run:
            results = [self._plan(source) for source in sources]
        elif sources:
            with ThreadPoolExecutor(
                max_workers=self.request.workers,
                thread_name_prefix="transcode",
            ) as executor:
                results = list(executor.map(self.transcode_file, sources))
        else:
            results = []

        counts = Counter(result.outcome for result in results)
        metrics: dict[str, object] = {outcome.value: counts[outcome] for outcome in TranscodeOutcome}
        metrics["duration"] = round(time.perf_counter() - start, 4)
        logger.info(
            "Transcode completed: %s",
            ", ".join(f"{outcome.value}={count}" for outcome, count in counts.items()),
            extra={
                "processing_event": ProcessingEvent.TRANSCODE_COMPLETE,
                "directory": str(base_path),
                "metrics": metrics,
            },
        )
        return results

    def transcode_file(self, source: Path) -> TranscodeResult:
        """Encode one file, then delete its source. Runs on a pool thread."""

        target = self.target_for(source)
        extra = {
            "source_path": source,
            "target_path": target,
            "base_path": self.request.base_path,
        }
        logger.info(
            "Converting %s -> %s",
            source,
            target,
            extra={"processing_event": ProcessingEvent.TRANSCODE_FILE_START, **extra},
        )

        try:
            self._encoder.encode(source, target, self.request.bitrate)
        except EncodeError as exc:
            logger.error(
                "Failed to convert %s -> %s: %s",
                source,
                target,
                exc.reason,
                extra={
                    "processing_event": ProcessingEvent.TRANSCODE_FILE_ERROR,
                    "error_message": exc.reason,
                    **extra,
                },
            )
            return TranscodeResult(source, target, TranscodeOutcome.ENCODE_FAILED, exc.reason)

        try:
            source.unlink()
        except OSError as exc:
            reason = f"converted but failed to remove source: {exc.strerror or exc}"
            logger.error(
                "Failed to remove %s: %s",
                source,
                exc,
                extra={
                    "processing_event": ProcessingEvent.TRANSCODE_FILE_ERROR,
                    "error_message": reason,
                    **extra,
                },
            )
            return TranscodeResult(source, target, TranscodeOutcome.DELETE_FAILED, reason)

        logger.info(
            "Converted %s -> %s",
            source,
            target,
            extra={"processing_event": ProcessingEvent.TRANSCODE_FILE_SUCCESS, **extra},
        )
        return TranscodeResult(source, target, TranscodeOutcome.CONVERTED)

    def _plan(self, source: Path) -> TranscodeResult:
        target = self.target_for(source)
        logger.debug("Would convert %s -> %s", source, target)
        return TranscodeResult(source, target, TranscodeOutcome.PLANNED)


__all__ = ["TranscodePipeline"]
