"""src/tagsort/features/sorting/usecases/file_sorter.py
What: Walk a collection once and reconcile every tagged file with its path.
Why: Keep classification, preview and the per-mode action in one sequential loop.
"""

from __future__ import annotations

import errno
from collections.abc import Callable
from pathlib import Path

from tagsort.features.tags import MusicFile, TagCodecPort
from tagsort.platform.filesystem import ensure_parent_directory, walk_files
from tagsort.platform.logging import logger
from tagsort.shared.errors import TagWriteError
from tagsort.shared.events import ProcessingEvent

from .processing_types import (
    FilePreview,
    SortLogContext,
    SortMode,
    SortOutcome,
    SortRequest,
    SortResult,
)


class FileSorter:
    """Reconcile directory layout and embedded tags under one root.

    Files are handled strictly one after another: each file's action (or
    preview) completes before the next file is visited.
    """

    request: SortRequest

    def __init__(
        self,
        request: SortRequest,
        *,
        codec: TagCodecPort,
        on_result: Callable[[SortResult], None] | None = None,
    ) -> None:
        self.request = request
        self._codec: TagCodecPort = codec
        self._on_result: Callable[[SortResult], None] | None = on_result

    @property
    def base_path(self) -> Path:
        return self.request.base_path

    def run(self) -> list[SortResult]:
        """Walk the root once and process every regular file.

        The walk is materialised before any action runs, so files moved
        during the pass are never visited twice.

        Raises:
            NotADirectoryError: If the root does not exist or is not a directory.
        """
        if not self.base_path.is_dir():
            raise NotADirectoryError(f"Not a directory: {self.base_path}")

        stats = SortLogContext(
            base_path=self.base_path,
            mode=self.request.mode,
            dry_run=self.request.dry_run,
        )
        logger.info(
            "Sort started: mode=%s, dry_run=%s, path=%s",
            self.request.mode.value,
            self.request.dry_run,
            self.base_path,
            extra={"processing_event": ProcessingEvent.SORT_START, **stats.summary_extra()},
        )

        files = list(walk_files(self.base_path))
        results: list[SortResult] = []
        for absolute_path in files:
            result = self.process_file(absolute_path)
            stats.record(result)
            results.append(result)
            if self._on_result is not None:
                self._on_result(result)

        logger.info(
            "Sort completed: %s",
            ", ".join(f"{outcome.value}={count}" for outcome, count in stats.outcomes.items()),
            extra={"processing_event": ProcessingEvent.SORT_COMPLETE, **stats.summary_extra()},
        )
        return results

    def process_file(self, absolute_path: Path) -> SortResult:
        """Classify one file and apply the configured action to it."""

        relative_path = absolute_path.relative_to(self.base_path)
        music_file = MusicFile.open(self.base_path, relative_path, self._codec)
        if music_file is None:
            return SortResult(relative_path=relative_path, outcome=SortOutcome.SKIPPED)

        if self.request.mode is SortMode.PATH_FROM_TAGS:
            return self.move_file(music_file)
        return self.modify_tags(music_file)

    def move_file(self, music_file: MusicFile) -> SortResult:
        """Move ``music_file`` to the path its tags describe."""

        if music_file.paths_match():
            return SortResult(relative_path=music_file.relative_path, outcome=SortOutcome.UNCHANGED)

        preview = self.build_preview(music_file)
        warnings = self._destination_warnings(music_file, preview)
        if self.request.dry_run:
            return SortResult(
                relative_path=music_file.relative_path,
                outcome=SortOutcome.PREVIEWED,
                preview=preview,
                target_path=preview.path_from_tags,
                warnings=warnings,
            )

        return self._move_to_tag_based_directory(music_file, preview, warnings)

    def modify_tags(self, music_file: MusicFile) -> SortResult:
        """Rewrite the tags of ``music_file`` from its position in the tree."""

        if not music_file.path_is_text():
            message = f"Path is not valid UTF-8, skipping: {music_file.relative_path}"
            logger.warning(message)
            return SortResult(
                relative_path=music_file.relative_path,
                outcome=SortOutcome.SKIPPED,
                warnings=[message],
            )

        if music_file.tags_match():
            return SortResult(relative_path=music_file.relative_path, outcome=SortOutcome.UNCHANGED)

        preview = self.build_preview(music_file)
        if self.request.dry_run:
            return SortResult(
                relative_path=music_file.relative_path,
                outcome=SortOutcome.PREVIEWED,
                preview=preview,
            )

        logger.info(
            "Rewriting tags for %s",
            music_file.relative_path,
            extra={
                "processing_event": ProcessingEvent.SORT_FILE_TAGS,
                "source_path": music_file.full_path,
                "base_path": self.base_path,
            },
        )
        try:
            warnings = music_file.set_tags(preview.new_tags)
        except TagWriteError as exc:
            self._log_failure(music_file.full_path, None, exc.reason)
            return SortResult(
                relative_path=music_file.relative_path,
                outcome=SortOutcome.TAGS_FAILED,
                preview=preview,
                error_message=exc.reason,
            )

        return SortResult(
            relative_path=music_file.relative_path,
            outcome=SortOutcome.TAGS_REWRITTEN,
            preview=preview,
            warnings=warnings,
        )

    @staticmethod
    def build_preview(music_file: MusicFile) -> FilePreview:
        """Collect both sides of an inconsistent file for display."""

        current = music_file.tags()
        return FilePreview(
            real_path=music_file.relative_path,
            path_from_tags=music_file.compose_path_from_tags(current),
            old_tags=current,
            new_tags=music_file.compose_target_tags(current),
        )

    @staticmethod
    def _destination_warnings(music_file: MusicFile, preview: FilePreview) -> list[str]:
        if preview.old_tags.title:
            return []
        # "title.ext" with an empty title is a dotfile without a suffix
        message = (
            f"No title tag for {music_file.relative_path}: "
            f"destination {preview.path_from_tags} is a hidden file without an extension"
        )
        logger.warning(message)
        return [message]

    def _move_to_tag_based_directory(
        self,
        music_file: MusicFile,
        preview: FilePreview,
        warnings: list[str],
    ) -> SortResult:
        source = music_file.full_path
        destination = self.base_path / preview.path_from_tags

        logger.info(
            "Moving %s to %s",
            source,
            destination,
            extra={
                "processing_event": ProcessingEvent.SORT_FILE_MOVE,
                "source_path": source,
                "target_path": destination,
                "base_path": self.base_path,
            },
        )
        try:
            if destination.exists() and not _same_file(source, destination):
                raise FileExistsError(errno.EEXIST, "Destination already exists", str(destination))
            _ = ensure_parent_directory(destination)
            _ = source.rename(destination)
        except OSError as exc:
            reason = exc.strerror or str(exc)
            self._log_failure(source, destination, reason)
            return SortResult(
                relative_path=music_file.relative_path,
                outcome=SortOutcome.MOVE_FAILED,
                preview=preview,
                target_path=preview.path_from_tags,
                error_message=reason,
                warnings=warnings,
            )

        return SortResult(
            relative_path=music_file.relative_path,
            outcome=SortOutcome.MOVED,
            preview=preview,
            target_path=preview.path_from_tags,
            warnings=warnings,
        )

    def _log_failure(self, source: Path, destination: Path | None, reason: str) -> None:
        logger.error(
            "Failed to process %s (destination=%s): %s",
            source,
            destination,
            reason,
            extra={
                "processing_event": ProcessingEvent.SORT_FILE_ERROR,
                "source_path": source,
                "target_path": destination,
                "base_path": self.base_path,
                "error_message": reason,
            },
        )


def _same_file(source: Path, destination: Path) -> bool:
    try:
        return source.samefile(destination)
    except FileNotFoundError:
        return False


__all__ = ["FileSorter"]
