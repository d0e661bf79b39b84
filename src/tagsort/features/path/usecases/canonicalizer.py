"""
Summary: Pure conversions between a relative file path and a TagSet.
Why: Both reconciliation directions share one definition of the artist/album/title layout.
"""

from __future__ import annotations

from pathlib import Path, PurePath

from tagsort.shared.tag_set import TagSet

from ..domain.sanitizer import Sanitizer


def tags_from_path(relative_path: PurePath) -> TagSet:
    """Derive a TagSet from the position of a file under the collection root.

    ``Artist/Album/Title.flac`` yields artist ``Artist``, album ``Album`` and
    title ``Title``. Missing ancestors leave the matching field empty; album
    artist and track number have no directory representation and stay empty.

    Args:
        relative_path: Path of the audio file relative to the collection root.

    Returns:
        TagSet: Sanitized tags derived from the path.
    """
    album_dir = relative_path.parent
    artist_dir = album_dir.parent

    derived = TagSet(
        artist=artist_dir.name,
        album=album_dir.name,
        title=relative_path.stem,
    )
    return Sanitizer.sanitize_tags(derived)


def path_from_tags(tags: TagSet, original_extension: str) -> Path:
    """Build the canonical ``artist/album/title.ext`` path for ``tags``.

    Fields go through ``Sanitizer.sanitize_segment`` first: slashes become
    hyphens, null bytes and invalid symbols are removed and ``.``/``..`` turn
    into empty strings. Tags read from a file have already had the same rules
    applied, so this only matters for hand-built tag sets. Empty fields
    produce empty segments rather than an error, so a malformed result is
    visible in the preview diff. The extension is reused verbatim.

    Args:
        tags: Tags to render, usually read from the file itself.
        original_extension: Extension of the current file, with or without
            the leading dot.

    Returns:
        Path: Relative destination path.
    """
    extension = original_extension.removeprefix(".")
    artist = Sanitizer.sanitize_segment(tags.artist)
    album = Sanitizer.sanitize_segment(tags.album)
    title = Sanitizer.sanitize_segment(tags.title)

    # album artist has no directory level
    return Path(artist) / album / f"{title}.{extension}"


__all__ = ["path_from_tags", "tags_from_path"]
