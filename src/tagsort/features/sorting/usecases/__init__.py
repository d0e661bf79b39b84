"""Use case helpers for the sorting flow."""

from .file_sorter import FileSorter
from .processing_types import (
    FilePreview,
    SortLogContext,
    SortMode,
    SortOutcome,
    SortRequest,
    SortResult,
)

__all__ = [
    "FilePreview",
    "FileSorter",
    "SortLogContext",
    "SortMode",
    "SortOutcome",
    "SortRequest",
    "SortResult",
]
