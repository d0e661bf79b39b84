"""In-memory tag codec and fake encoder shared by the test suite.

The fake codec stores each file's tags as JSON inside the file itself, so a
rename carries the tags along exactly like a real audio file would.
"""

from __future__ import annotations

import json
import threading
import time
from pathlib import Path

from tagsort.shared.errors import EncodeError, TagReadError, TagWriteError
from tagsort.shared.tag_set import TagField


class FakeTagBlock:
    """Dictionary-backed tag block persisted as JSON."""

    def __init__(self, codec: FakeTagCodec, path: Path, fields: dict[str, str]) -> None:
        self._codec = codec
        self._path = path
        self.fields = fields

    def get(self, field: TagField) -> str | None:
        return self.fields.get(field.value)

    def set(self, field: TagField, value: str) -> None:
        self.fields[field.value] = value

    def remove(self, field: TagField) -> None:
        _ = self.fields.pop(field.value, None)

    def save(self) -> None:
        if self._path in self._codec.read_only:
            raise TagWriteError(self._path, "Permission denied")
        _ = self._path.write_text(json.dumps(self.fields), encoding="utf-8")
        self._codec.saved.append(self._path)


class FakeTagCodec:
    """Codec that treats any file holding a JSON object as a tagged track."""

    def __init__(self) -> None:
        self.read_only: set[Path] = set()
        self.saved: list[Path] = []

    def open(self, path: Path) -> FakeTagBlock:
        try:
            raw = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise TagReadError(path, str(exc)) from exc
        try:
            fields = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise TagReadError(path, "unsupported file type") from exc
        if not isinstance(fields, dict):
            raise TagReadError(path, "no tag block")
        return FakeTagBlock(self, path, {str(k): str(v) for k, v in fields.items()})


def write_track(path: Path, **fields: str) -> Path:
    """Create ``path`` holding the given easy-tag fields."""

    path.parent.mkdir(parents=True, exist_ok=True)
    _ = path.write_text(json.dumps(fields), encoding="utf-8")
    return path


def read_track(path: Path) -> dict[str, str]:
    """Return the tag fields stored in ``path``."""

    return json.loads(path.read_text(encoding="utf-8"))


class FakeEncoder:
    """Encoder that records concurrency and writes a placeholder target."""

    def __init__(self, delay: float = 0.0, failures: set[str] | None = None) -> None:
        self.delay = delay
        self.failures = failures or set()
        self.calls: list[tuple[Path, Path, str]] = []
        self.active = 0
        self.max_active = 0
        self._lock = threading.Lock()

    def encode(self, source: Path, target: Path, bitrate: str) -> None:
        with self._lock:
            self.calls.append((source, target, bitrate))
            self.active += 1
            self.max_active = max(self.max_active, self.active)
        try:
            if self.delay:
                time.sleep(self.delay)
            if source.name in self.failures:
                raise EncodeError(source, target, "exit status 1: Invalid data found")
            _ = target.write_bytes(b"mp3")
        finally:
            with self._lock:
                self.active -= 1

