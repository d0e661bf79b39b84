# Where: tagsort.features.tags.__init__
# What: Expose the track record and tag codec ports.
# Why: Provide a cohesive import surface for the sorter and the CLI.

from .adapters import MutagenTagBlock, MutagenTagCodec
from .usecases.music_file import MusicFile
from .usecases.ports import TagBlockPort, TagCodecPort

__all__ = [
    "MusicFile",
    "MutagenTagBlock",
    "MutagenTagCodec",
    "TagBlockPort",
    "TagCodecPort",
]
