"""Logger bootstrap for tagsort.

Where: platform/logging/config.py
What: Build the console and rotating-file handlers of the ``tagsort`` logger.
Why: The CLI reconfigures levels and the log file per run, while library code
only ever imports the shared ``logger``.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path
from typing import Final

from rich.console import Console

from tagsort.config.paths import default_log_file

from .handlers import WhitePathRichHandler

LOGGER_NAME: Final[str] = "tagsort"
DEFAULT_LOG_FILE: Final[Path] = default_log_file()

LOG_FILE_MAX_BYTES: Final[int] = 10 * 1024 * 1024
LOG_FILE_BACKUPS: Final[int] = 5
# Transcodes log from pool threads, so the file log records which one spoke
FILE_LOG_FORMAT: Final[str] = "%(asctime)s - %(levelname)s - [%(threadName)s] %(message)s"


def _console_handler(level: int) -> logging.Handler:
    # stderr keeps stdout free for the progress dots and summary tables
    handler = WhitePathRichHandler(console=Console(stderr=True, soft_wrap=True))
    handler.setLevel(level)
    return handler


def _file_handler(log_file: Path, level: int) -> logging.Handler:
    """Open a rotating UTF-8 log file, creating its directory first.

    Raises:
        OSError: If the directory or the file cannot be created.
    """
    resolved = log_file.expanduser().resolve()
    resolved.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.handlers.RotatingFileHandler(
        resolved,
        maxBytes=LOG_FILE_MAX_BYTES,
        backupCount=LOG_FILE_BACKUPS,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(FILE_LOG_FORMAT))
    return handler


def setup_logger(
    log_file: Path | None = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> logging.Logger:
    """Replace the handlers of the ``tagsort`` logger.

    Args:
        log_file: Rotating log file to attach; ``None`` logs to the console only.
        console_level: Threshold for the rich console handler.
        file_level: Threshold for the file handler.

    Returns:
        logging.Logger: The reconfigured shared logger.

    A log file that cannot be opened is reported on the console and the run
    continues without it.
    """
    app_logger = logging.getLogger(LOGGER_NAME)
    app_logger.setLevel(logging.DEBUG)

    for handler in list(app_logger.handlers):
        app_logger.removeHandler(handler)
        handler.close()

    app_logger.addHandler(_console_handler(console_level))

    if log_file is not None:
        try:
            app_logger.addHandler(_file_handler(Path(log_file), file_level))
        except OSError as exc:
            app_logger.warning("Cannot open log file %s, logging to console only: %s", log_file, exc)

    return app_logger


# Console only until the CLI attaches the configured log file
logger: Final[logging.Logger] = setup_logger(log_file=None)


__all__ = ["DEFAULT_LOG_FILE", "LOGGER_NAME", "logger", "setup_logger"]
