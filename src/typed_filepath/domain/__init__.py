"""
Summary: Export the Filepath value type, its constructor helpers and errors.
Why: Provide a stable import surface for the package root and tests.
"""

from .errors import (
    DEFAULT_DATA_PATH,
    FilepathError,
    InvalidPathDataError,
    OnError,
    raise_error,
)
from .factory import FilepathTransform, make_filepath
from .filepath import Filepath
from .options import UNSET, FilepathOptions, Unset
from .validation import (
    FilepathValidator,
    validate_filepath_data,
    validate_strict_filepath_data,
)

__all__ = [
    "DEFAULT_DATA_PATH",
    "Filepath",
    "FilepathError",
    "FilepathOptions",
    "FilepathTransform",
    "FilepathValidator",
    "InvalidPathDataError",
    "OnError",
    "UNSET",
    "Unset",
    "make_filepath",
    "raise_error",
    "validate_filepath_data",
    "validate_strict_filepath_data",
]
