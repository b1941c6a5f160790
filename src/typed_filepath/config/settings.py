"""Default path algebra selection.

Where: config/settings.py
What: Select the default path algebra from explicit input or the environment.
Why: Let hosts force a non-native separator convention without touching call sites.
Assumptions: - Environment lookups happen per call so tests can monkeypatch freely.
Trade-offs: - Only the shipped algebras can be named; custom ones are passed explicitly.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from enum import Enum
from typing import Final

from typed_filepath.algebra import POSIX, WIN32, PathAlgebra, native_path_algebra


ENV_ALGEBRA: Final[str] = "TYPED_FILEPATH_ALGEBRA"


class AlgebraName(str, Enum):
    """Names accepted when selecting the default path algebra."""

    NATIVE = "native"
    POSIX = "posix"
    WIN32 = "win32"

    @staticmethod
    def from_user_input(value: str) -> "AlgebraName":
        """Translate a raw setting into the matching algebra name."""

        normalized = value.strip().lower()
        if normalized == "windows":
            return AlgebraName.WIN32
        for name in AlgebraName:
            if name.value == normalized:
                return name
        valid: Final[str] = ", ".join(n.value for n in AlgebraName)
        msg = f"Unsupported path algebra '{value}'. Valid options: {valid}"
        raise ValueError(msg)


def resolve_algebra_name(
    explicit: str | None = None,
    env: Mapping[str, str] | None = None,
) -> AlgebraName:
    """Resolve the algebra name honoring explicit and environment overrides."""

    if explicit is not None:
        return AlgebraName.from_user_input(explicit)

    mapping = env if env is not None else os.environ
    candidate = (mapping.get(ENV_ALGEBRA) or "").strip()
    if candidate:
        return AlgebraName.from_user_input(candidate)

    return AlgebraName.NATIVE


def default_path_algebra(env: Mapping[str, str] | None = None) -> PathAlgebra:
    """Return the path algebra new Filepaths bind to when none is supplied."""

    name = resolve_algebra_name(env=env)
    if name is AlgebraName.POSIX:
        return POSIX
    if name is AlgebraName.WIN32:
        return WIN32
    return native_path_algebra()


__all__ = [
    "ENV_ALGEBRA",
    "AlgebraName",
    "default_path_algebra",
    "resolve_algebra_name",
]
