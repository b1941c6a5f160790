"""
Summary: Exceptions and the default error handler for Filepath construction.
Why: Give validation failures a structured shape callers can route through ``on_error``.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Final, NoReturn

DEFAULT_DATA_PATH: Final[str] = "input"


class FilepathError(Exception):
    """Base class for errors raised by typed_filepath."""


class InvalidPathDataError(FilepathError, ValueError):
    """Raised when a validator rejects a candidate path string."""

    kind: Final[str] = "InvalidPathData"

    def __init__(self, message: str, value: str, data_path: str = DEFAULT_DATA_PATH) -> None:
        super().__init__(f"{data_path}: {message}")
        self.message: str = message
        self.value: str = value
        self.data_path: str = data_path

    def details(self) -> dict[str, str]:
        """Return the failure description as plain data."""
        return {
            "kind": self.kind,
            "message": self.message,
            "value": self.value,
            "data_path": self.data_path,
        }


OnError = Callable[[InvalidPathDataError], object]


def raise_error(error: InvalidPathDataError) -> NoReturn:
    """Default ``on_error`` handler: propagate the failure to the caller."""
    raise error


__all__ = [
    "DEFAULT_DATA_PATH",
    "FilepathError",
    "InvalidPathDataError",
    "OnError",
    "raise_error",
]
