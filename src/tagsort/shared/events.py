"""Structured event identifiers shared by the sorter, pruner and transcoder.

Where: shared/.
What: StrEnum of ``processing_event`` values attached to log records.
Why: The Rich console handler renders these records without importing features.
"""

from __future__ import annotations

from enum import StrEnum

__all__ = ["ProcessingEvent"]


class ProcessingEvent(StrEnum):
    """Structured event identifiers for processing logs."""

    SORT_START = "sort.run.start"
    SORT_COMPLETE = "sort.run.complete"
    SORT_FILE_MOVE = "sort.file.move"
    SORT_FILE_TAGS = "sort.file.tags"
    SORT_FILE_ERROR = "sort.file.error"
    PRUNE_DIRECTORY = "prune.directory"
    TRANSCODE_START = "transcode.run.start"
    TRANSCODE_COMPLETE = "transcode.run.complete"
    TRANSCODE_FILE_START = "transcode.file.start"
    TRANSCODE_FILE_SUCCESS = "transcode.file.success"
    TRANSCODE_FILE_ERROR = "transcode.file.error"
