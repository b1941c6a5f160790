"""Rich console handler for Filepath log records.

Where: platform/logging/handlers.py
What: Render ``filepath``/``base`` record extras as compact, separator-styled paths.
Why: Keep path formatting out of the value type while making derivation logs readable.
"""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class FilepathRichHandler(RichHandler):
    """Rich handler that appends the record's path, relative to its base when possible."""

    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with compact defaults.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs.setdefault("show_time", False)
        kwargs.setdefault("show_path", False)
        kwargs.setdefault("rich_tracebacks", True)
        kwargs.setdefault("markup", False)
        super().__init__(*args, **kwargs)

    def format_path(self, path: str, base: str | None = None) -> Text:
        """Format a path with colored separators and ellipsis truncation.

        Args:
            path: Absolute or relative path string to format.
            base: Optional base path used to relativize ``path`` when possible.

        Returns:
            Text: Styled path text.
        """
        pure_path = self._to_pure_path(path)
        base_path = self._to_pure_path(base) if base else None

        display_path: PurePath = pure_path
        if (
            base_path is not None
            and type(base_path) is type(pure_path)
            and pure_path.is_relative_to(base_path)
        ):
            relative_path = pure_path.relative_to(base_path)
            if str(relative_path) not in {"", "."}:
                display_path = relative_path

        is_windows = isinstance(display_path, PureWindowsPath)
        separator = "\\" if is_windows else "/"
        anchor = display_path.anchor
        body_parts = [part for part in display_path.parts if part and part != anchor]

        truncated = len(body_parts) > self._PATH_SEGMENT_LIMIT
        if truncated:
            body_parts = body_parts[-self._PATH_SEGMENT_LIMIT:]

        display_string = anchor.rstrip("\\/") + separator if anchor else ""
        if truncated:
            display_string += "…" + separator
        display_string += separator.join(body_parts)

        return self._style_path_string(display_string or ".", separator)

    @staticmethod
    def _to_pure_path(raw_path: str) -> PurePath:
        """Return a convention-aware ``PurePath`` for the given raw string."""

        if "\\" in raw_path or (len(raw_path) >= 2 and raw_path[1] == ":"):
            return PureWindowsPath(raw_path)
        return PurePosixPath(raw_path)

    @staticmethod
    def _style_path_string(path_string: str, separator: str) -> Text:
        """Apply Rich styling to the rendered path string."""

        text = Text()
        for char in path_string:
            if char == separator or char == "…":
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render the message followed by the record's path, if any."""

        filepath = getattr(record, "filepath", None)
        if not filepath:
            return super().render_message(record, message)

        text = Text(message)
        _ = text.append(" @ ")
        _ = text.append_text(
            self.format_path(str(filepath), base=getattr(record, "base", None))
        )
        return text


__all__ = ["FilepathRichHandler"]
