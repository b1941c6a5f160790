"""
Summary: Smart constructor that builds a Filepath and applies follow-up transforms.
Why: Offer a function-style entry point that composes construction with caller steps.
"""

from __future__ import annotations

from collections.abc import Callable

from typed_filepath.algebra import PathAlgebra

from .errors import OnError, raise_error
from .filepath import Filepath
from .validation import FilepathValidator, validate_filepath_data

FilepathTransform = Callable[[Filepath], Filepath]


def make_filepath(
    value: str,
    *transforms: FilepathTransform,
    base: str | None = None,
    path_algebra: PathAlgebra | None = None,
    on_error: OnError = raise_error,
    validator: FilepathValidator = validate_filepath_data,
) -> Filepath:
    """Create a Filepath, then pass it through each transform in order.

    Args:
        value: Raw path string.
        *transforms: Callables applied left to right to the new Filepath.
        base: Parent path to keep track of.
        path_algebra: Algebra to bind; defaults to the configured one.
        on_error: Receives validation failures.
        validator: Acceptance rule for the normalized value.

    Returns:
        Filepath: The constructed (and transformed) value.
    """
    result = Filepath(
        value,
        base=base,
        path_algebra=path_algebra,
        on_error=on_error,
        validator=validator,
    )
    for transform in transforms:
        result = transform(result)
    return result


__all__ = ["FilepathTransform", "make_filepath"]
