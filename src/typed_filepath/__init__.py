"""
Summary: Export the Filepath value type, path algebras, and logging setup.
Why: Provide a single import surface for applications.
"""

from .algebra import (
    POSIX,
    WIN32,
    ParsedPath,
    PathAlgebra,
    PosixPathAlgebra,
    WindowsPathAlgebra,
    native_path_algebra,
)
from .config import default_path_algebra
from .domain import (
    Filepath,
    FilepathError,
    FilepathOptions,
    InvalidPathDataError,
    UNSET,
    make_filepath,
    raise_error,
    validate_filepath_data,
    validate_strict_filepath_data,
)
from .platform.logging import setup_logger

__all__ = [
    "POSIX",
    "WIN32",
    "Filepath",
    "FilepathError",
    "FilepathOptions",
    "InvalidPathDataError",
    "ParsedPath",
    "PathAlgebra",
    "PosixPathAlgebra",
    "UNSET",
    "WindowsPathAlgebra",
    "default_path_algebra",
    "make_filepath",
    "native_path_algebra",
    "raise_error",
    "setup_logger",
    "validate_filepath_data",
    "validate_strict_filepath_data",
]
