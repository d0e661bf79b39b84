"""Summary: Track record binding one audio file to its tag block and path checks.
Why: Both reconciliation modes ask the same questions of a file, in one place."""

from __future__ import annotations

from pathlib import Path

from tagsort.features.path import Sanitizer, path_from_tags, tags_from_path
from tagsort.platform.logging import logger
from tagsort.shared.errors import TagReadError
from tagsort.shared.tag_set import TagField, TagSet

from .ports import TagBlockPort, TagCodecPort

# u16 upper bound, the widest track number the common tag formats store
MAX_TRACK_NUMBER = 65535


class MusicFile:
    """An audio file under the collection root with a readable tag block.

    Tags are never cached: every read opens the file again and every write
    rewrites the whole block.
    """

    base_path: Path
    relative_path: Path

    def __init__(self, base_path: Path, relative_path: Path, codec: TagCodecPort) -> None:
        self.base_path = base_path
        self.relative_path = relative_path
        self._codec: TagCodecPort = codec

    @classmethod
    def open(cls, base_path: Path, relative_path: Path, codec: TagCodecPort) -> MusicFile | None:
        """Build a record, or return ``None`` if the file has no readable tags.

        Files without an extension are rejected too, since the canonical
        path has to reuse it.
        """
        if not relative_path.suffix:
            return None

        record = cls(base_path, relative_path, codec)
        try:
            _ = record._open_block()
        except TagReadError as exc:
            logger.debug("Skipping %s: %s", relative_path, exc.reason)
            return None
        return record

    @property
    def full_path(self) -> Path:
        return self.base_path / self.relative_path

    @property
    def extension(self) -> str:
        return self.relative_path.suffix

    def _open_block(self) -> TagBlockPort:
        return self._codec.open(self.full_path)

    def tags(self) -> TagSet:
        """Read and sanitize the embedded tags.

        Text fields go through the path-safety rules and the track number is
        reduced to its leading digits, so a stored ``"3/12"`` reads as ``"3"``.

        Raises:
            TagReadError: If the file stopped being readable after the
                record was built.
        """
        block = self._open_block()
        read = TagSet(
            artist=block.get(TagField.ARTIST) or "",
            album_artist=block.get(TagField.ALBUM_ARTIST) or "",
            album=block.get(TagField.ALBUM) or "",
            title=block.get(TagField.TITLE) or "",
            track_number=block.get(TagField.TRACK_NUMBER) or "",
        )
        return Sanitizer.normalize_tags(Sanitizer.sanitize_tags(read))

    def compose_tags_from_path(self) -> TagSet:
        return tags_from_path(self.relative_path)

    def compose_path_from_tags(self, tags: TagSet) -> Path:
        return path_from_tags(tags, self.extension)

    def compose_target_tags(self, current: TagSet | None = None) -> TagSet:
        """Tags this file should carry when the path is authoritative.

        The path has no track-number level, so the embedded track number is
        carried over.
        """
        if current is None:
            current = self.tags()
        return self.compose_tags_from_path().with_track_number(current.track_number)

    def tags_match(self) -> bool:
        """Whether the embedded tags already agree with the path."""

        current = self.tags()
        return self.compose_target_tags(current) == current

    def path_is_text(self) -> bool:
        """Whether the relative path can be rendered as UTF-8 text."""

        return _render(self.relative_path) is not None

    def paths_match(self) -> bool:
        """Whether the file already lives at the path its tags describe."""

        real_path = _render(self.relative_path)
        if real_path is None:
            return False
        path_from_tags_str = _render(self.compose_path_from_tags(self.tags()))
        if path_from_tags_str is None:
            return False
        return real_path == path_from_tags_str

    def set_tags(self, tags: TagSet) -> list[str]:
        """Rewrite artist, album, title and track number from ``tags``.

        Album artist is always removed, since path-derived tags cannot
        supply it. A track number that does not parse as an unsigned integer
        is skipped with a warning while the other fields are still written.

        Returns:
            list[str]: Warnings raised during the write.

        Raises:
            TagWriteError: If the block cannot be persisted.
        """
        warnings: list[str] = []
        block = self._open_block()
        block.remove(TagField.ALBUM_ARTIST)
        block.set(TagField.TITLE, tags.title)
        block.set(TagField.ALBUM, tags.album)
        block.set(TagField.ARTIST, tags.artist)

        track_number = _parse_track_number(tags.track_number)
        if track_number is None:
            message = (
                f"Failed to parse track number for {self.relative_path}: "
                f"'{tags.track_number}'"
            )
            logger.warning(message)
            warnings.append(message)
        else:
            block.set(TagField.TRACK_NUMBER, str(track_number))

        block.save()
        return warnings

    def remove_tags(self) -> None:
        """Remove every field tagsort manages and persist the block."""

        block = self._open_block()
        for field in TagField:
            block.remove(field)
        block.save()

    def __repr__(self) -> str:
        return f"MusicFile({self.relative_path!s})"


def _parse_track_number(value: str) -> int | None:
    if not value.isascii() or not value.isdigit():
        return None
    number = int(value)
    return number if number <= MAX_TRACK_NUMBER else None


def _render(path: Path) -> str | None:
    """Render ``path`` as text, or ``None`` if it is not valid UTF-8."""

    rendered = str(path)
    try:
        _ = rendered.encode("utf-8")
    except UnicodeEncodeError:
        return None
    return rendered


__all__ = ["MAX_TRACK_NUMBER", "MusicFile"]
