"""
Summary: Per-call overrides applied when one Filepath derives another.
Why: Centralize the inherit-unless-overridden rule for every setting a derived Filepath carries.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Final, TypeVar

from typed_filepath.algebra import PathAlgebra

from .errors import OnError
from .validation import FilepathValidator

T = TypeVar("T")


class Unset(Enum):
    """Marker type for options the caller did not supply."""

    TOKEN = "UNSET"

    def __repr__(self) -> str:
        return "UNSET"


UNSET: Final = Unset.TOKEN


def pick(override: T | Unset, inherited: T) -> T:
    """Return ``override`` unless it is ``UNSET``."""
    if isinstance(override, Unset):
        return inherited
    return override


@dataclass(slots=True, frozen=True)
class FilepathOptions:
    """Overrides for a derived Filepath; ``UNSET`` fields inherit from the parent.

    ``base=None`` is a real override that drops the parent's base.
    """

    base: str | None | Unset = UNSET
    path_algebra: PathAlgebra | Unset = UNSET
    validator: FilepathValidator | Unset = UNSET
    on_error: OnError | Unset = UNSET


__all__ = ["UNSET", "FilepathOptions", "Unset", "pick"]
