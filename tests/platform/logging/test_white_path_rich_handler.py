"""Tests for the ``WhitePathRichHandler`` processing event rendering."""

from __future__ import annotations

import logging
from io import StringIO
from typing import Any

from rich.console import Console
from rich.text import Text

from tagsort.platform.logging import WhitePathRichHandler


def _make_handler() -> WhitePathRichHandler:
    """Create a handler instance with an in-memory console."""

    console = Console(file=StringIO(), force_terminal=True, soft_wrap=True)
    return WhitePathRichHandler(console=console)


def _build_record(**extras: Any) -> logging.LogRecord:
    """Create a ``LogRecord`` populated with processing extras for testing."""

    record = logging.LogRecord(
        name="tagsort",
        level=logging.INFO,
        pathname="test",
        lineno=0,
        msg="",
        args=(),
        exc_info=None,
    )
    for key, value in extras.items():
        setattr(record, key, value)
    return record


def test_move_event_renders_relative_source_and_target() -> None:
    handler = _make_handler()
    base = "/home/user/music"

    record = _build_record(
        processing_event="sort.file.move",
        base_path=base,
        source_path=f"{base}/Unknown/Unknown/track1.flac",
        target_path=f"{base}/A/B/C.flac",
    )

    rendered = handler.render_message(record, "")
    assert isinstance(rendered, Text)
    assert rendered.plain == "📦 Moving Unknown/Unknown/track1.flac → A/B/C.flac"


def test_long_absolute_paths_are_truncated() -> None:
    handler = _make_handler()
    record = _build_record(
        processing_event="transcode.file.start",
        source_path="/home/user/music/Various/2019 OST/Disc 1/13 Night.flac",
    )

    rendered = handler.render_message(record, "")
    assert isinstance(rendered, Text)
    assert "…/music/Various/2019 OST/Disc 1/13 Night.flac" not in rendered.plain
    assert "…/Various/2019 OST/Disc 1/13 Night.flac" in rendered.plain


def test_metrics_and_errors_are_appended() -> None:
    handler = _make_handler()
    record = _build_record(
        processing_event="sort.run.complete",
        directory="/music",
        metrics={"moved": 2, "dry-run": True, "verbose": False, "duration": 1.23456},
    )

    plain = handler.render_message(record, "").plain  # pyright: ignore[reportAttributeAccessIssue]
    assert "[moved=2, dry-run, duration=1.23]" in plain
    assert plain.endswith("@ /music")

    error_record = _build_record(
        processing_event="transcode.file.error",
        source_path="/music/a.flac",
        error_message="exit status 1",
    )
    assert "(exit status 1)" in handler.render_message(error_record, "").plain  # pyright: ignore[reportAttributeAccessIssue]


def test_plain_records_fall_back_to_rich_rendering() -> None:
    handler = _make_handler()
    record = _build_record()
    rendered = handler.render_message(record, "[bold]not markup[/bold]")
    assert isinstance(rendered, Text)
    assert rendered.plain == "[bold]not markup[/bold]"
