"""Adapters implementing transcode feature ports."""

from .ffmpeg_encoder import FfmpegEncoder

__all__ = ["FfmpegEncoder"]
