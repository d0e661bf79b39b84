"""Summary: Ports describing the embedded tag codec used by track records.
Why: Keep tag-format specifics in adapters so tests can swap in an in-memory codec."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from tagsort.shared.tag_set import TagField


@runtime_checkable
class TagBlockPort(Protocol):
    """In-memory view of one file's tag block."""

    def get(self, field: TagField) -> str | None:
        """Return the first value stored for ``field``, if any."""
        ...

    def set(self, field: TagField, value: str) -> None:
        """Replace every value stored for ``field``."""
        ...

    def remove(self, field: TagField) -> None:
        """Delete ``field`` from the block; missing fields are ignored."""
        ...

    def save(self) -> None:
        """Persist the block back to its file."""
        ...


@runtime_checkable
class TagCodecPort(Protocol):
    """Factory that opens the tag block of an audio file."""

    def open(self, path: Path) -> TagBlockPort:
        """Open ``path``; raise ``TagReadError`` when it carries no readable tags."""
        ...


__all__ = ["TagBlockPort", "TagCodecPort"]
