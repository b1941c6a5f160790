"""
Summary: Validators deciding which strings may become Filepath values.
Why: Keep acceptance rules swappable so stricter hosts can opt in without subclassing.
"""

from __future__ import annotations

from typing import Protocol

from .errors import DEFAULT_DATA_PATH, InvalidPathDataError


class FilepathValidator(Protocol):
    """Callable that returns the accepted value or raises ``InvalidPathDataError``."""

    def __call__(self, value: str, *, data_path: str = DEFAULT_DATA_PATH) -> str: ...


def validate_filepath_data(value: str, *, data_path: str = DEFAULT_DATA_PATH) -> str:
    """Accept any string as filepath data.

    A filepath need not exist on disk and need not use any particular
    separator convention, so there is nothing to reject here. Hosts that
    want stricter rules pass their own validator instead.

    Args:
        value: Normalized candidate path.
        data_path: Logical location of ``value`` for error reporting.

    Returns:
        str: ``value`` unchanged.
    """
    _ = data_path
    return value


def validate_strict_filepath_data(value: str, *, data_path: str = DEFAULT_DATA_PATH) -> str:
    """Reject empty strings and strings containing NUL bytes.

    Args:
        value: Normalized candidate path.
        data_path: Logical location of ``value`` for error reporting.

    Returns:
        str: ``value`` unchanged when it is acceptable.

    Raises:
        InvalidPathDataError: If ``value`` is empty or contains ``\\0``.
    """
    if not value:
        raise InvalidPathDataError("filepath must not be empty", value, data_path)
    if "\0" in value:
        raise InvalidPathDataError("filepath must not contain NUL bytes", value, data_path)
    return value


__all__ = [
    "FilepathValidator",
    "validate_filepath_data",
    "validate_strict_filepath_data",
]
