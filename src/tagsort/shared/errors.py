# Where: tagsort.shared.errors
# What: Exception hierarchy shared by the tag, sorting and transcode features.
# Why: Let callers tell per-file failures apart from precondition violations.


class TagsortError(Exception):
    """Base class for errors raised by tagsort."""


class TagReadError(TagsortError):
    """Raised when a file cannot be opened as a tagged audio file."""

    def __init__(self, path: object, reason: str) -> None:
        super().__init__(f"Cannot read tags from {path}: {reason}")
        self.path: object = path
        self.reason: str = reason


class TagWriteError(TagsortError):
    """Raised when a tag block cannot be persisted back to its file."""

    def __init__(self, path: object, reason: str) -> None:
        super().__init__(f"Cannot write tags to {path}: {reason}")
        self.path: object = path
        self.reason: str = reason


class EncodeError(TagsortError):
    """Raised when the external encoder fails for a single file."""

    def __init__(self, source: object, target: object, reason: str) -> None:
        super().__init__(f"Failed to convert {source} -> {target}: {reason}")
        self.source: object = source
        self.target: object = target
        self.reason: str = reason


__all__ = ["EncodeError", "TagReadError", "TagWriteError", "TagsortError"]
