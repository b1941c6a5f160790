"""
Summary: Protocol and records describing the path algebra consumed by Filepath.
Why: Let POSIX, Windows and test-double algebras plug in without touching the value type.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@dataclass(slots=True, frozen=True)
class ParsedPath:
    """Decomposed path parts; any field may be empty depending on path shape."""

    root: str
    dir: str
    base: str
    name: str
    ext: str


@runtime_checkable
class PathAlgebra(Protocol):
    """Pure string operations encoding one filesystem path convention."""

    @property
    def sep(self) -> str:
        """Return the preferred segment separator."""
        ...

    def normalize(self, path: str) -> str:
        """Collapse redundant separators and dot segments."""
        ...

    def join(self, *segments: str) -> str:
        """Join segments with the separator and normalize the result."""
        ...

    def resolve(self, *segments: str) -> str:
        """Assemble an absolute path from right to left."""
        ...

    def relative(self, from_path: str, to_path: str) -> str:
        """Return the relative path leading from ``from_path`` to ``to_path``."""
        ...

    def dirname(self, path: str) -> str:
        """Return the parent portion of ``path``."""
        ...

    def basename(self, path: str, ext: str | None = None) -> str:
        """Return the final segment, optionally stripping ``ext``."""
        ...

    def extname(self, path: str) -> str:
        """Return the extension of the final segment."""
        ...

    def is_absolute(self, path: str) -> bool:
        """Return whether ``path`` is absolute."""
        ...

    def parse(self, path: str) -> ParsedPath:
        """Split ``path`` into root, dir, base, name and ext."""
        ...

    def to_namespaced_path(self, path: str) -> str:
        """Return the platform namespaced form of ``path``."""
        ...


__all__ = ["ParsedPath", "PathAlgebra"]
