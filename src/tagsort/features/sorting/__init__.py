# Where: tagsort.features.sorting.__init__
# What: Expose the sorter and its request/result types.
# Why: Provide a cohesive import surface for the application and UI layers.

from .usecases import (
    FilePreview,
    FileSorter,
    SortMode,
    SortOutcome,
    SortRequest,
    SortResult,
)

__all__ = [
    "FilePreview",
    "FileSorter",
    "SortMode",
    "SortOutcome",
    "SortRequest",
    "SortResult",
]
