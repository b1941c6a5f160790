"""
Summary: POSIX and Windows path algebras built on the posixpath and ntpath modules.
Why: Provide the native conventions behind Filepath while keeping results free of filesystem access.
"""

from __future__ import annotations

import ntpath
import os
import posixpath
from abc import ABC, abstractmethod
from collections.abc import Callable
from types import ModuleType
from typing import ClassVar, final, override

from .ports import ParsedPath


class _StdlibPathAlgebra(ABC):
    """Shared rules for algebras backed by a stdlib ``*path`` module."""

    _module: ClassVar[ModuleType]
    _separators: ClassVar[str]

    def __init__(self, cwd: Callable[[], str] = os.getcwd) -> None:
        """Initialize the algebra.

        Args:
            cwd: Callable returning the working directory used by ``resolve``.
        """
        self._cwd = cwd

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    @property
    def sep(self) -> str:
        return self._module.sep

    def _fold(self, part: str) -> str:
        """Return ``part`` in the form used for comparisons."""
        return part

    def normalize(self, path: str) -> str:
        if not path:
            return "."

        normalized = self._module.normpath(path)
        # a trailing separator survives normalization
        if path[-1] in self._separators and normalized[-1] not in self._separators:
            normalized += self.sep
        return normalized

    def join(self, *segments: str) -> str:
        joined = self.sep.join(segment for segment in segments if segment)
        if not joined:
            return "."
        return self.normalize(joined)

    @abstractmethod
    def resolve(self, *segments: str) -> str:
        """Assemble an absolute path from right to left."""

    def relative(self, from_path: str, to_path: str) -> str:
        from_abs = self.resolve(from_path)
        to_abs = self.resolve(to_path)

        from_drive, from_rest = self._module.splitdrive(from_abs)
        to_drive, to_rest = self._module.splitdrive(to_abs)
        if self._fold(from_drive) != self._fold(to_drive):
            return to_abs

        from_parts = [part for part in from_rest.split(self.sep) if part]
        to_parts = [part for part in to_rest.split(self.sep) if part]

        common = 0
        for from_part, to_part in zip(from_parts, to_parts):
            if self._fold(from_part) != self._fold(to_part):
                break
            common += 1

        if common == len(from_parts) == len(to_parts):
            return ""
        return self.sep.join([".."] * (len(from_parts) - common) + to_parts[common:])

    def dirname(self, path: str) -> str:
        drive, rest = self._module.splitdrive(path)
        if not rest:
            return drive or "."

        stripped = rest.rstrip(self._separators)
        if not stripped:
            # nothing but separators: the root is its own parent
            return drive + rest[0]

        return self._module.dirname(drive + stripped) or "."

    def basename(self, path: str, ext: str | None = None) -> str:
        _drive, rest = self._module.splitdrive(path)
        name = self._module.basename(rest.rstrip(self._separators))
        if ext and name != ext and name.endswith(ext):
            return name[: -len(ext)]
        return name

    def extname(self, path: str) -> str:
        name = self.basename(path)
        index = name.rfind(".")
        if index <= 0 or name == "..":
            return ""
        return name[index:]

    def is_absolute(self, path: str) -> bool:
        if not path:
            return False
        if path[0] in self._separators:
            return True
        _drive, rest = self._module.splitdrive(path)
        return bool(rest) and rest[0] in self._separators

    def parse(self, path: str) -> ParsedPath:
        drive, rest = self._module.splitdrive(path)
        root = drive
        if rest and rest[0] in self._separators:
            root += rest[0]

        base = self.basename(path)
        ext = self.extname(path)
        name = base[: -len(ext)] if ext else base

        trimmed = drive + rest.rstrip(self._separators)
        head = trimmed[: len(trimmed) - len(base)].rstrip(self._separators)
        directory = head if len(head) >= len(root) else root

        return ParsedPath(root=root, dir=directory, base=base, name=name, ext=ext)

    def to_namespaced_path(self, path: str) -> str:
        return path


@final
class PosixPathAlgebra(_StdlibPathAlgebra):
    """Forward-slash paths rooted at ``/``."""

    _module: ClassVar[ModuleType] = posixpath
    _separators: ClassVar[str] = "/"

    @override
    def resolve(self, *segments: str) -> str:
        resolved = ""
        for segment in reversed(segments):
            if not segment:
                continue
            resolved = f"{segment}/{resolved}" if resolved else segment
            if self.is_absolute(resolved):
                break

        if not self.is_absolute(resolved):
            cwd = self._cwd()
            resolved = f"{cwd}/{resolved}" if resolved else cwd

        return posixpath.normpath(resolved)


@final
class WindowsPathAlgebra(_StdlibPathAlgebra):
    """Drive-letter and UNC paths using backslash separators."""

    _module: ClassVar[ModuleType] = ntpath
    _separators: ClassVar[str] = "\\/"

    @override
    def _fold(self, part: str) -> str:
        return part.lower()

    @override
    def resolve(self, *segments: str) -> str:
        resolved_drive = ""
        resolved_tail = ""
        resolved_absolute = False

        # the working directory is consulted last, only when still incomplete
        candidates: list[str | None] = [*reversed(segments), None]
        for candidate in candidates:
            segment = self._cwd() if candidate is None else candidate
            if not segment:
                continue

            drive, rest = ntpath.splitdrive(segment)
            if drive and resolved_drive and self._fold(drive) != self._fold(resolved_drive):
                continue
            if not resolved_drive:
                resolved_drive = drive

            if not resolved_absolute:
                resolved_tail = f"{rest}\\{resolved_tail}" if resolved_tail else rest
                resolved_absolute = bool(rest) and rest[0] in self._separators

            if resolved_absolute and resolved_drive:
                break

        # a drive-relative path on a foreign drive resolves from that drive's root
        if not resolved_absolute and resolved_drive:
            resolved_tail = f"\\{resolved_tail}"

        return ntpath.normpath(resolved_drive + resolved_tail)

    @override
    def to_namespaced_path(self, path: str) -> str:
        if not path:
            return path

        resolved = self.resolve(path)
        if len(resolved) <= 2:
            return path

        if resolved.startswith("\\\\"):
            if resolved[2] not in "?.":
                return "\\\\?\\UNC\\" + resolved[2:]
        elif resolved[0].isalpha() and resolved[1:3] == ":\\":
            return "\\\\?\\" + resolved
        return path


POSIX: PosixPathAlgebra = PosixPathAlgebra()
WIN32: WindowsPathAlgebra = WindowsPathAlgebra()


def native_path_algebra() -> PosixPathAlgebra | WindowsPathAlgebra:
    """Return the algebra matching the host platform's conventions."""

    return WIN32 if os.name == "nt" else POSIX


__all__ = [
    "POSIX",
    "WIN32",
    "PosixPathAlgebra",
    "WindowsPathAlgebra",
    "native_path_algebra",
]
