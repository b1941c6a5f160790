"""
Summary: Export the path algebra protocol and the shipped POSIX/Windows algebras.
Why: Provide a stable import surface for the value type, configuration and tests.
"""

from .ports import ParsedPath, PathAlgebra
from .stdlib import (
    POSIX,
    WIN32,
    PosixPathAlgebra,
    WindowsPathAlgebra,
    native_path_algebra,
)

__all__ = [
    "POSIX",
    "WIN32",
    "ParsedPath",
    "PathAlgebra",
    "PosixPathAlgebra",
    "WindowsPathAlgebra",
    "native_path_algebra",
]
