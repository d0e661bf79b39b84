"""Progress display functionality for CLI."""

from __future__ import annotations

from typing import final

from rich.console import Console

from tagsort.features.sorting import SortOutcome, SortResult

from .preview import PreviewDisplay


@final
class ProgressDisplay:
    """Prints a marker per consistent file and a diff per file needing action."""

    console: Console
    preview_display: PreviewDisplay

    def __init__(self, console: Console | None = None, *, quiet: bool = False) -> None:
        self.console = console or Console()
        self.preview_display = PreviewDisplay(self.console)
        self.quiet: bool = quiet

    def on_result(self, result: SortResult) -> None:
        """Sorter callback invoked once per walked file."""

        if self.quiet or result.outcome is SortOutcome.SKIPPED:
            return
        if result.outcome is SortOutcome.UNCHANGED:
            self.console.print(".", end="")
            return
        self.preview_display.show_diff(result)

    def finish(self) -> None:
        """Terminate the marker line."""

        if not self.quiet:
            self.console.print()
