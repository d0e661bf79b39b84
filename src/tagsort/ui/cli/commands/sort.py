"""src/tagsort/ui/cli/commands/sort.py
What: Execute a reconciliation run for a collection root via the CLI.
Why: Bridge parsed arguments with the application service and the displays.
"""

from __future__ import annotations

from tagsort.application.services.sort_service import (
    SortLibraryReport,
    SortLibraryRequest,
    SortLibraryService,
)
from tagsort.ui.cli.args.options import SortArgs
from tagsort.ui.cli.display.progress import ProgressDisplay
from tagsort.ui.cli.display.result import ResultDisplay


class SortCommand:
    """Command running the sort pass and the optional post-passes."""

    args: SortArgs
    app: SortLibraryService
    request: SortLibraryRequest
    progress_display: ProgressDisplay
    result_display: ResultDisplay

    def __init__(self, args: SortArgs, app: SortLibraryService | None = None) -> None:
        self.args = args
        self.app = app or SortLibraryService()
        self.request = SortLibraryRequest(
            base_path=args.music_path,
            mode=args.mode,
            dry_run=args.dry_run,
            prune_empty=args.prune_empty,
            transcode=args.transcode,
            workers=args.workers,
            bitrate=args.bitrate,
        )
        self.progress_display = ProgressDisplay(quiet=args.quiet)
        self.result_display = ResultDisplay()

    def execute(self) -> SortLibraryReport:
        """Run the command and display its results."""

        try:
            report = self.app.run(self.request, on_result=self.progress_display.on_result)
        finally:
            self.progress_display.finish()
        self.result_display.show_results(report, dry_run=self.args.dry_run, quiet=self.args.quiet)
        return report
