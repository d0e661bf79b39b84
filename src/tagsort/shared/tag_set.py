# Where: tagsort.shared.tag_set
# What: Canonical TagSet value object shared across features.
# Why: Both the path canonicalizer and the tag codec exchange the same record.

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import StrEnum


class TagField(StrEnum):
    """Embedded tag fields managed by tagsort, keyed by their easy-tag names."""

    ARTIST = "artist"
    ALBUM_ARTIST = "albumartist"
    ALBUM = "album"
    TITLE = "title"
    TRACK_NUMBER = "tracknumber"


@dataclass(frozen=True, slots=True)
class TagSet:
    """Artist/album/title/track record for one audio file.

    An empty string means the field is absent. Equality is structural over
    every field, so two records only match when all five values agree.
    """

    artist: str = ""
    album_artist: str = ""
    album: str = ""
    title: str = ""
    track_number: str = ""

    def with_track_number(self, track_number: str) -> TagSet:
        """Return a copy carrying ``track_number`` instead of the current one."""

        return replace(self, track_number=track_number)

    def __str__(self) -> str:
        return (
            f"artist={self.artist!r}, album_artist={self.album_artist!r}, "
            f"album={self.album!r}, title={self.title!r}, track={self.track_number!r}"
        )


__all__ = ["TagField", "TagSet"]
