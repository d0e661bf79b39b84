"""Tests for CLI progress, preview and result rendering."""

from __future__ import annotations

from io import StringIO
from pathlib import Path

from rich.console import Console

from tagsort.application.services.sort_service import SortLibraryReport
from tagsort.features.sorting import FilePreview, SortOutcome, SortResult
from tagsort.features.transcode import TranscodeOutcome, TranscodeResult
from tagsort.shared.tag_set import TagSet
from tagsort.ui.cli.display import ProgressDisplay, ResultDisplay


def _console() -> tuple[Console, StringIO]:
    buffer = StringIO()
    return Console(file=buffer, width=200, color_system=None), buffer


def _previewed() -> SortResult:
    preview = FilePreview(
        real_path=Path("Unknown/track1.flac"),
        path_from_tags=Path("A/B/C.flac"),
        old_tags=TagSet(artist="A", album="B", title="C"),
        new_tags=TagSet(album="Unknown", title="track1"),
    )
    return SortResult(relative_path=Path("Unknown/track1.flac"), outcome=SortOutcome.PREVIEWED, preview=preview)


def test_unchanged_files_print_a_dot() -> None:
    console, buffer = _console()
    display = ProgressDisplay(console)

    display.on_result(SortResult(relative_path=Path("a.mp3"), outcome=SortOutcome.UNCHANGED))
    display.on_result(SortResult(relative_path=Path("b.mp3"), outcome=SortOutcome.UNCHANGED))
    display.on_result(SortResult(relative_path=Path("c.jpg"), outcome=SortOutcome.SKIPPED))

    assert buffer.getvalue() == ".."


def test_preview_shows_both_sides() -> None:
    console, buffer = _console()

    ProgressDisplay(console).on_result(_previewed())

    output = buffer.getvalue()
    assert "Real path: Unknown/track1.flac" in output
    assert "Path from tags: A/B/C.flac" in output
    assert "Old tags: artist='A'" in output
    assert "New tags: artist=''" in output
    assert "Preview" in output


def test_quiet_suppresses_progress() -> None:
    console, buffer = _console()
    display = ProgressDisplay(console, quiet=True)

    display.on_result(_previewed())
    display.finish()

    assert buffer.getvalue() == ""


def test_result_display_lists_counts_and_failures() -> None:
    console, buffer = _console()
    report = SortLibraryReport(
        sort_results=[
            SortResult(relative_path=Path("a.mp3"), outcome=SortOutcome.UNCHANGED),
            SortResult(
                relative_path=Path("b.mp3"),
                outcome=SortOutcome.MOVE_FAILED,
                error_message="Destination already exists",
            ),
        ],
        pruned_directories=[Path("/music/Unknown")],
        transcode_results=[
            TranscodeResult(Path("/music/x.flac"), Path("/music/x.mp3"), TranscodeOutcome.CONVERTED),
        ],
    )

    ResultDisplay(console).show_results(report, dry_run=False)

    output = buffer.getvalue()
    assert "Sort Summary" in output
    assert "move_failed" in output
    assert "Transcode Summary" in output
    assert "Empty directories removed: 1" in output
    assert "b.mp3: Destination already exists" in output


def test_quiet_result_display_only_lists_failures() -> None:
    console, buffer = _console()
    report = SortLibraryReport(
        sort_results=[SortResult(relative_path=Path("a.mp3"), outcome=SortOutcome.UNCHANGED)],
    )

    ResultDisplay(console).show_results(report, dry_run=False, quiet=True)

    assert buffer.getvalue() == ""
