"""Adapters implementing tag feature ports."""

from .mutagen_codec import MutagenTagBlock, MutagenTagCodec

__all__ = ["MutagenTagBlock", "MutagenTagCodec"]
