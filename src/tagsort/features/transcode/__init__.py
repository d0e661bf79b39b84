# Where: tagsort.features.transcode.__init__
# What: Expose the transcode pipeline, its encoder port and the ffmpeg adapter.
# Why: Provide a cohesive import surface for the application layer.

from .adapters import FfmpegEncoder
from .usecases import (
    EncoderPort,
    TranscodeOutcome,
    TranscodePipeline,
    TranscodeRequest,
    TranscodeResult,
)

__all__ = [
    "EncoderPort",
    "FfmpegEncoder",
    "TranscodeOutcome",
    "TranscodePipeline",
    "TranscodeRequest",
    "TranscodeResult",
]
