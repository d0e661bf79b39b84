"""src/tagsort/ui/cli/display/result.py
What: Render end-of-run summaries for the sort, prune and transcode passes.
Why: Keep console output formatting consistent across the interface.
"""

from __future__ import annotations

from collections import Counter
from typing import final

from rich.console import Console
from rich.table import Table

from tagsort.application.services.sort_service import SortLibraryReport
from tagsort.features.sorting import SortOutcome
from tagsort.features.transcode import TranscodeOutcome


@final
class ResultDisplay:
    """Handles result display in CLI."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        """Initialize result display."""
        self.console = console or Console()

    def show_results(self, report: SortLibraryReport, *, dry_run: bool, quiet: bool = False) -> None:
        """Display a summary of every pass that ran.

        Args:
            report: Results collected by the application service.
            dry_run: Whether the run was a dry run.
            quiet: Whether to suppress non-error output.
        """
        if not quiet:
            self._show_sort_summary(report)
            self._show_prune_summary(report, dry_run=dry_run)
            self._show_transcode_summary(report)
        self._show_failures(report)

    def _show_sort_summary(self, report: SortLibraryReport) -> None:
        counts = Counter(result.outcome for result in report.sort_results)
        table = Table(title="Sort Summary")
        _ = table.add_column("Outcome", style="cyan")
        _ = table.add_column("Files", justify="right", style="green")
        for outcome in SortOutcome:
            if counts[outcome]:
                table.add_row(outcome.value, str(counts[outcome]))
        table.add_row("total", str(len(report.sort_results)), style="bold")
        self.console.print(table)

    def _show_prune_summary(self, report: SortLibraryReport, *, dry_run: bool) -> None:
        if not report.pruned_directories:
            return
        verb = "would be removed" if dry_run else "removed"
        self.console.print(f"Empty directories {verb}: {len(report.pruned_directories)}")

    def _show_transcode_summary(self, report: SortLibraryReport) -> None:
        if not report.transcode_results:
            return
        counts = Counter(result.outcome for result in report.transcode_results)
        table = Table(title="Transcode Summary")
        _ = table.add_column("Outcome", style="cyan")
        _ = table.add_column("Files", justify="right", style="green")
        for outcome in TranscodeOutcome:
            if counts[outcome]:
                table.add_row(outcome.value, str(counts[outcome]))
        self.console.print(table)

    def _show_failures(self, report: SortLibraryReport) -> None:
        failures: list[str] = [
            f"{result.relative_path}: {result.error_message}"
            for result in report.sort_results
            if not result.success
        ]
        failures.extend(
            f"{result.source_path}: {result.error_message}"
            for result in report.transcode_results
            if not result.success
        )
        if not failures:
            return
        self.console.print(f"[red]Failed: {len(failures)}[/red]")
        for failure in failures:
            self.console.print(f"  • {failure}", style="red", markup=False)
