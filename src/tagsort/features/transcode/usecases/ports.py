"""Summary: Port for the external encoder driven by the transcode pipeline.
Why: Let tests run the bounded pool without spawning real encoder processes."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class EncoderPort(Protocol):
    """Encode one audio file into another format."""

    def encode(self, source: Path, target: Path, bitrate: str) -> None:
        """Write ``target`` from ``source``; raise ``EncodeError`` on failure."""
        ...


__all__ = ["EncoderPort"]
