"""
Summary: Filesystem-safety rules applied to TagSet fields.
Why: Keep every path segment derived from tags free of separators and reserved symbols.
"""

import re
from dataclasses import replace
from typing import ClassVar, final

from tagsort.shared.tag_set import TagSet


@final
class Sanitizer:
    """Sanitize tag text so it can be used as a single path segment."""

    # Path separators that would split one field across several directories
    SLASH: ClassVar[str] = "/"
    SLASH_REPLACEMENT: ClassVar[str] = "-"

    NULL_BYTE: ClassVar[str] = "\0"

    # Names the filesystem resolves to the current or parent directory
    DOT_SEGMENTS: ClassVar[frozenset[str]] = frozenset({".", ".."})

    # Symbols rejected by at least one mainstream filesystem
    INVALID_SYMBOLS: ClassVar[re.Pattern[str]] = re.compile(r'[<>:"/\\|?*]')

    # Leading run of ASCII digits (str.isdigit would also accept other scripts)
    LEADING_DIGITS: ClassVar[re.Pattern[str]] = re.compile(r"[0-9]*")

    @classmethod
    def replace_slashes(cls, text: str) -> str:
        """Replace forward slashes with hyphens (``AC/DC`` -> ``AC-DC``)."""
        return text.replace(cls.SLASH, cls.SLASH_REPLACEMENT)

    @classmethod
    def remove_null_bytes(cls, text: str) -> str:
        """Drop null bytes left behind by malformed tag frames."""
        return text.replace(cls.NULL_BYTE, "")

    @classmethod
    def remove_invalid_symbols(cls, text: str) -> str:
        """Strip characters that are not allowed in file names."""
        return cls.INVALID_SYMBOLS.sub("", text)

    @classmethod
    def sanitize_segment(cls, text: str) -> str:
        """Apply every text rule in order.

        Args:
            text: Raw field value from a path or an embedded tag.

        Returns:
            str: Text with slashes replaced by hyphens, then null bytes and
            invalid symbols removed. A result of ``.`` or ``..`` becomes an
            empty string so it can never climb out of the collection root.
        """
        text = cls.replace_slashes(text)
        text = cls.remove_null_bytes(text)
        text = cls.remove_invalid_symbols(text)
        return "" if text in cls.DOT_SEGMENTS else text

    @classmethod
    def sanitize_tags(cls, tags: TagSet) -> TagSet:
        """Return ``tags`` with the four text fields sanitized.

        The track number is left untouched; see ``normalize_track_number``.
        """
        return replace(
            tags,
            artist=cls.sanitize_segment(tags.artist),
            album_artist=cls.sanitize_segment(tags.album_artist),
            album=cls.sanitize_segment(tags.album),
            title=cls.sanitize_segment(tags.title),
        )

    @classmethod
    def normalize_track_number(cls, track_number: str) -> str:
        """Keep only the leading ASCII digits of a track number.

        ``"12 - Song"`` becomes ``"12"``, ``"3/12"`` becomes ``"3"`` and
        ``"Side B"`` becomes an empty string.
        """
        match = cls.LEADING_DIGITS.match(track_number)
        return match.group(0) if match else ""

    @classmethod
    def normalize_tags(cls, tags: TagSet) -> TagSet:
        """Return ``tags`` with the track number normalized."""
        return tags.with_track_number(cls.normalize_track_number(tags.track_number))


__all__ = ["Sanitizer"]
