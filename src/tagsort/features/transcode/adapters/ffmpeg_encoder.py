"""src/tagsort/features/transcode/adapters/ffmpeg_encoder.py
What: EncoderPort implementation that shells out to ffmpeg.
Why: ffmpeg handles every lossless input format with one command line."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import final

from tagsort.features.transcode.usecases.ports import EncoderPort
from tagsort.platform.logging import logger
from tagsort.shared.errors import EncodeError

# Lines of ffmpeg stderr kept in a failure message
_STDERR_TAIL_LINES = 3


@final
class FfmpegEncoder(EncoderPort):
    """Run ``ffmpeg`` once per file, waiting for it to finish."""

    def __init__(self, binary: str = "ffmpeg") -> None:
        self.binary: str = binary

    def build_command(self, source: Path, target: Path, bitrate: str) -> list[str]:
        # -n: refuse to overwrite an existing output instead of prompting
        return [
            self.binary,
            "-nostdin",
            "-n",
            "-i",
            str(source),
            "-ab",
            bitrate,
            str(target),
        ]

    def encode(self, source: Path, target: Path, bitrate: str) -> None:
        cmd = self.build_command(source, target, bitrate)
        logger.debug("Running %s", " ".join(cmd))
        try:
            _ = subprocess.run(
                cmd,
                check=True,
                stdin=subprocess.DEVNULL,
                capture_output=True,
            )
        except subprocess.CalledProcessError as exc:
            raise EncodeError(source, target, _describe_failure(exc)) from exc
        except OSError as exc:
            raise EncodeError(source, target, f"cannot run {self.binary}: {exc}") from exc


def _describe_failure(exc: subprocess.CalledProcessError) -> str:
    # ffmpeg echoes tags and file names verbatim, so stderr need not be UTF-8
    raw = exc.stderr if isinstance(exc.stderr, bytes) else b""
    stderr = raw.decode("utf-8", errors="replace")
    tail = [line for line in stderr.strip().splitlines() if line.strip()][-_STDERR_TAIL_LINES:]
    message = f"exit status {exc.returncode}"
    if tail:
        message += ": " + " | ".join(tail)
    return message


__all__ = ["FfmpegEncoder"]
