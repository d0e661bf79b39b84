"""src/tagsort/features/tags/adapters/mutagen_codec.py
What: TagCodecPort implementation backed by mutagen's easy tag interfaces.
Why: mutagen maps ID3, Vorbis comments and MP4 atoms onto one key space."""

from __future__ import annotations

from pathlib import Path
from typing import Any, final

import mutagen
from mutagen import MutagenError

from tagsort.features.tags.usecases.ports import TagBlockPort, TagCodecPort
from tagsort.platform.logging import logger
from tagsort.shared.errors import TagReadError, TagWriteError
from tagsort.shared.tag_set import TagField


@final
class MutagenTagBlock(TagBlockPort):
    """Tag block wrapper around a ``mutagen.FileType`` opened with ``easy=True``."""

    def __init__(self, path: Path, audio: Any) -> None:
        self._path: Path = path
        self._audio: Any = audio

    def get(self, field: TagField) -> str | None:
        values = self._audio.tags.get(field.value)
        if not values:
            return None
        if isinstance(values, list):
            return str(values[0])
        return str(values)

    def set(self, field: TagField, value: str) -> None:
        self._audio.tags[field.value] = [value]

    def remove(self, field: TagField) -> None:
        if field.value in self._audio.tags:
            del self._audio.tags[field.value]

    def save(self) -> None:
        try:
            self._audio.save()
        except (MutagenError, OSError) as exc:
            raise TagWriteError(self._path, str(exc)) from exc


@final
class MutagenTagCodec(TagCodecPort):
    """Open tag blocks through ``mutagen.File``."""

    def open(self, path: Path) -> TagBlockPort:
        try:
            audio = mutagen.File(path, easy=True)
        except (MutagenError, OSError) as exc:
            logger.debug("mutagen failed to open %s: %s", path, exc)
            raise TagReadError(path, str(exc)) from exc

        if audio is None:
            raise TagReadError(path, "unsupported file type")
        if audio.tags is None:
            raise TagReadError(path, "no tag block")
        return MutagenTagBlock(path, audio)


__all__ = ["MutagenTagBlock", "MutagenTagCodec"]
