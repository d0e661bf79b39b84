# Where: tagsort.shared.__init__
# What: Provide a concise import surface for shared value objects and errors.
# Why: Encourage consistent reuse of shared types across features.

"""Shared cross-cutting types exposed at the package level."""

from .errors import EncodeError, TagReadError, TagWriteError, TagsortError
from .tag_set import TagField, TagSet

__all__ = [
    "EncodeError",
    "TagField",
    "TagReadError",
    "TagSet",
    "TagWriteError",
    "TagsortError",
]
