"""Tests for the CLI sort command."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from tagsort.application.services.sort_service import SortLibraryReport, SortLibraryRequest
from tagsort.features.sorting import SortMode, SortOutcome, SortResult
from tagsort.ui.cli.args import SortArgs
from tagsort.ui.cli.commands import SortCommand


class StubService:
    """Records the request and replays one result through the callback."""

    def __init__(self) -> None:
        self.requests: list[SortLibraryRequest] = []

    def run(
        self,
        request: SortLibraryRequest,
        on_result: Callable[[SortResult], None] | None = None,
    ) -> SortLibraryReport:
        self.requests.append(request)
        result = SortResult(relative_path=Path("a.mp3"), outcome=SortOutcome.UNCHANGED)
        if on_result is not None:
            on_result(result)
        return SortLibraryReport(sort_results=[result])


def test_execute_builds_request_from_args(tmp_path: Path) -> None:
    args = SortArgs(
        music_path=tmp_path,
        mode=SortMode.PATH_FROM_TAGS,
        dry_run=True,
        prune_empty=False,
        transcode=True,
        workers=3,
        bitrate="192k",
        verbose=False,
        quiet=True,
    )
    service = StubService()

    report = SortCommand(args, service).execute()  # pyright: ignore[reportArgumentType]

    assert service.requests == [
        SortLibraryRequest(
            base_path=tmp_path,
            mode=SortMode.PATH_FROM_TAGS,
            dry_run=True,
            prune_empty=False,
            transcode=True,
            workers=3,
            bitrate="192k",
        )
    ]
    assert [result.outcome for result in report.sort_results] == [SortOutcome.UNCHANGED]
