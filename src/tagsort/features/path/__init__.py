# Path: `src/tagsort/features/path/__init__.py`
# Summary: Export path feature domain and use case symbols.
# Why: Provide a stable import surface for adapters and tests.

from .domain.sanitizer import Sanitizer
from .usecases.canonicalizer import path_from_tags, tags_from_path

__all__ = [
    "Sanitizer",
    "path_from_tags",
    "tags_from_path",
]
