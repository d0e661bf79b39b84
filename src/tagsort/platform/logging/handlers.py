"""Rich console handler for tagsort processing events.

Where: platform/logging/handlers.py
What: Render structured ``processing_event`` records with icons and compact paths.
Why: Keep console formatting out of the feature code that emits the events.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar

from typing_extensions import override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class WhitePathRichHandler(RichHandler):
    """Custom Rich handler that displays file paths in white."""

    _PROCESSING_STYLES: ClassVar[dict[str, tuple[str, str, str]]] = {
        "sort.run.start": ("🚀", "cyan", "Sort start"),
        "sort.run.complete": ("✅", "green", "Sort complete"),
        "sort.file.move": ("📦", "magenta", "Moving "),
        "sort.file.tags": ("🏷️", "blue", "Rewriting tags "),
        "sort.file.error": ("⛔", "red", "Failed "),
        "prune.directory": ("🧹", "yellow", "Removing empty directory "),
        "transcode.run.start": ("🚀", "cyan", "Transcode start"),
        "transcode.run.complete": ("✅", "green", "Transcode complete"),
        "transcode.file.start": ("🎧", "blue", "Converting "),
        "transcode.file.success": ("🎉", "green", "Converted "),
        "transcode.file.error": ("⛔", "red", "Failed "),
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with custom settings.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    def _format_path(self, path: str, base: str | None = None) -> Text:
        """Format a path relative to ``base`` with colored separators."""

        pure_path = self._to_pure_path(path)
        base_path = self._to_pure_path(base) if base else None

        display_path: PurePath = pure_path
        if base_path is not None and pure_path.is_relative_to(base_path):
            relative_path = pure_path.relative_to(base_path)
            if str(relative_path) not in {"", "."}:
                display_path = relative_path

        separator = "\\" if isinstance(display_path, PureWindowsPath) else "/"
        anchor = display_path.anchor
        body_parts = [part for part in display_path.parts if part and part != anchor]

        truncated = len(body_parts) > self._PATH_SEGMENT_LIMIT
        if truncated:
            body_parts = body_parts[-self._PATH_SEGMENT_LIMIT:]

        display_string = anchor if anchor else ""
        if truncated:
            display_string += "…" + separator
        display_string += separator.join(body_parts)
        return self._style_path_string(display_string or ".", separator)

    @staticmethod
    def _to_pure_path(raw_path: str) -> PurePath:
        """Return a platform-aware ``PurePath`` for the given raw string."""

        if "\\" in raw_path:
            return PureWindowsPath(raw_path)
        return PurePosixPath(raw_path)

    @staticmethod
    def _style_path_string(path_string: str, separator: str) -> Text:
        """Apply Rich styling to the rendered path string."""

        text = Text()
        for char in path_string:
            if char in {separator, "…"}:
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    def _render_processing_message(self, record: logging.LogRecord) -> Text | None:
        """Render structured processing events with dedicated styling."""

        event = getattr(record, "processing_event", None)
        if not isinstance(event, str):
            return None

        icon, color, label = self._PROCESSING_STYLES.get(event, ("ℹ️", "blue", ""))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        _ = body.append(label)

        base_path = getattr(record, "base_path", None)
        base = str(base_path) if base_path else None

        source_path = getattr(record, "source_path", None)
        if source_path:
            _ = body.append_text(self._format_path(str(source_path), base=base))

        target_path = getattr(record, "target_path", None)
        if target_path:
            _ = body.append(" → ")
            _ = body.append_text(self._format_path(str(target_path), base=base))

        metrics = getattr(record, "metrics", None)
        if isinstance(metrics, Mapping) and metrics:
            _ = body.append(" [" + self._format_metrics(metrics) + "]")

        error_message = getattr(record, "error_message", None)
        if error_message:
            _ = body.append(f" ({error_message})")

        directory = getattr(record, "directory", None)
        if directory:
            _ = body.append(" @ ")
            _ = body.append_text(self._format_path(str(directory)))

        _ = text.append_text(body)
        return text

    @staticmethod
    def _format_metrics(metrics: Mapping[str, object]) -> str:
        parts: list[str] = []
        for key, value in metrics.items():
            if isinstance(value, bool):
                if value:
                    parts.append(key)
            elif isinstance(value, float):
                parts.append(f"{key}={value:.2f}")
            else:
                parts.append(f"{key}={value}")
        return ", ".join(parts)

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for processing events."""

        processing_text = self._render_processing_message(record)
        if processing_text is not None:
            return processing_text

        return super().render_message(record, message)


__all__ = ["WhitePathRichHandler"]
