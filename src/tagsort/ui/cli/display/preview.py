"""src/tagsort/ui/cli/display/preview.py
Where: CLI adapter layer for preview rendering.
What: Render the human-diffable view of a file that needs action.
Why: Let users judge a planned change, malformed paths included, before applying it.
"""

from __future__ import annotations

from typing import final

from rich.console import Console
from rich.text import Text

from tagsort.features.sorting import SortOutcome, SortResult
from tagsort.shared.tag_set import TagSet

_STATUS: dict[SortOutcome, tuple[str, str]] = {
    SortOutcome.PREVIEWED: ("✨ Preview", "yellow"),
    SortOutcome.TAGS_REWRITTEN: ("✅ Modified tags", "green"),
    SortOutcome.MOVED: ("✅ Moved", "green"),
    SortOutcome.TAGS_FAILED: ("❌ Tag write failed", "red"),
    SortOutcome.MOVE_FAILED: ("❌ Move failed", "red"),
}


@final
class PreviewDisplay:
    """Handles diff display in CLI."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def show_diff(self, result: SortResult) -> None:
        """Print the two sides of an inconsistent file followed by its status."""

        preview = result.preview
        if preview is None:
            return

        self.console.print()
        self.console.print(self._line("Real path", str(preview.real_path)))
        self.console.print(self._line("Path from tags", str(preview.path_from_tags)))
        self.console.print(self._line("Old tags", self._format_tags(preview.old_tags)))
        self.console.print(self._line("New tags", self._format_tags(preview.new_tags)))

        label, color = _STATUS.get(result.outcome, ("ℹ️ " + result.outcome.value, "blue"))
        status = Text(label, style=color)
        if result.error_message:
            _ = status.append(f": {result.error_message}")
        self.console.print(status)
        for warning in result.warnings:
            self.console.print(Text(f"⚠️ {warning}", style="yellow"))

    @staticmethod
    def _line(label: str, value: str) -> Text:
        return Text.assemble((f"{label}: ", "bold cyan"), value)

    @staticmethod
    def _format_tags(tags: TagSet) -> str:
        return str(tags)
