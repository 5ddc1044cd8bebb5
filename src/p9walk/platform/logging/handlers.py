"""Rich console handler for walk diagnostics.

Where: platform/logging/handlers.py
What: Render structured walk events with icons, colours and compact paths.
Why: Keep per-entry error reporting readable on stderr while output stays on stdout.
"""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class WalkRichHandler(RichHandler):
    """Rich handler that renders ``walk_event`` records with highlighted paths."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "walk.root.start": ("🚶", "cyan"),
        "walk.root.complete": ("✅", "green"),
        "walk.root.error": ("❌", "red"),
        "walk.entry.error": ("⛔", "red"),
        "walk.command.failed": ("⚠️", "yellow"),
        "walk.lookup.failed": ("ℹ️", "blue"),
    }
    _EVENT_LABELS: ClassVar[dict[str, str]] = {
        "walk.root.start": "Walking ",
        "walk.root.complete": "Finished ",
        "walk.root.error": "Cannot walk ",
        "walk.entry.error": "Skipped ",
        "walk.command.failed": "Command failed for ",
        "walk.lookup.failed": "Lookup failed for ",
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

    def _format_path(self, path: str) -> Text:
        """Format a path with coloured separators and leading ellipsis truncation.

        Args:
            path: Walk path as printed to stdout.

        Returns:
            Text: At most the last four segments, separators in magenta.
        """
        pure_path: PurePath = PurePosixPath(path)
        separator = "/"
        anchor = pure_path.anchor
        body_parts = [part for part in pure_path.parts if part and part != anchor]

        truncated = len(body_parts) > self._PATH_SEGMENT_LIMIT
        if truncated:
            body_parts = body_parts[-self._PATH_SEGMENT_LIMIT:]

        display_string = ""
        if truncated:
            display_string = "…" + separator
        elif anchor:
            display_string = separator
        display_string += separator.join(body_parts)
        if not display_string:
            display_string = "."

        text = Text()
        for char in display_string:
            if char in {separator, "…"}:
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    def _render_walk_message(self, record: logging.LogRecord) -> Text | None:
        """Render structured walk events with dedicated styling."""

        event = getattr(record, "walk_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        _ = body.append(self._EVENT_LABELS.get(event, ""))

        path = getattr(record, "path", None)
        if path is not None:
            _ = body.append_text(self._format_path(str(path)))

        details: list[str] = []
        if event == "walk.root.complete":
            for key in ("visited", "reported", "pruned", "entry_errors"):
                value = getattr(record, key, None)
                if isinstance(value, int):
                    details.append(f"{key}={value}")
            duration = getattr(record, "duration_seconds", None)
            if isinstance(duration, (int, float)):
                details.append(f"duration={duration:.2f}s")
        elif event == "walk.command.failed":
            returncode = getattr(record, "returncode", None)
            if isinstance(returncode, int):
                details.append(f"exit={returncode}")
        elif event == "walk.lookup.failed":
            field_code = getattr(record, "field_code", None)
            if field_code:
                details.append(f"field={field_code}")

        error = getattr(record, "error_message", None)
        if error:
            details.append(str(error))
        if details:
            _ = body.append(" (" + ", ".join(details) + ")")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for walk events."""

        walk_text = self._render_walk_message(record)
        if walk_text is not None:
            return walk_text

        return super().render_message(record, message)


__all__ = ["WalkRichHandler"]
