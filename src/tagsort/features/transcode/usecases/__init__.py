"""Use case helpers for the transcode flow."""

from .ports import EncoderPort
from .transcode_pipeline import TranscodePipeline
from .transcode_types import TranscodeOutcome, TranscodeRequest, TranscodeResult

__all__ = [
    "EncoderPort",
    "TranscodeOutcome",
    "TranscodePipeline",
    "TranscodeRequest",
    "TranscodeResult",
]
