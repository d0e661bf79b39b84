"""CLI display helpers."""

from .preview import PreviewDisplay
from .progress import ProgressDisplay
from .result import ResultDisplay

__all__ = ["PreviewDisplay", "ProgressDisplay", "ResultDisplay"]
