"""
Summary: Immutable, validated filepath value bound to a base and a path algebra.
Why: Give path strings a distinct type that proves validation and tracks where it came from.
"""

from __future__ import annotations

from typing import Any, final

from typed_filepath.algebra import ParsedPath, PathAlgebra
from typed_filepath.config.settings import default_path_algebra
from typed_filepath.platform.logging import logger

from .errors import InvalidPathDataError, OnError, raise_error
from .options import UNSET, FilepathOptions, Unset, pick
from .validation import FilepathValidator, validate_filepath_data


@final
class Filepath:
    """A normalized path string that has passed validation.

    Every operation either returns a plain value computed by the bound path
    algebra, or a new Filepath that inherits this one's ``base``,
    ``path_algebra``, validator and error handler unless the caller
    overrides them. The validator and handler take no part in equality.
    """

    __slots__ = ("_value", "_base", "_path_algebra", "_validator", "_on_error", "_parsed")

    _value: str
    _base: str | None
    _path_algebra: PathAlgebra
    _validator: FilepathValidator
    _on_error: OnError
    _parsed: ParsedPath | None

    def __init__(
        self,
        value: str,
        *,
        base: str | None = None,
        path_algebra: PathAlgebra | None = None,
        on_error: OnError = raise_error,
        validator: FilepathValidator = validate_filepath_data,
    ) -> None:
        """Create a new Filepath.

        Args:
            value: Raw path string; stored in normalized form.
            base: Parent path this Filepath is built from or relative to.
                Carried along untouched, e.g. to track where a ``$ref`` was found.
            path_algebra: Algebra used for every path operation. Defaults to
                the configured algebra (the host platform's, normally).
            on_error: Receives the ``InvalidPathDataError`` when validation
                fails. Construction aborts even if the handler returns.
            validator: Accepts the normalized value or raises
                ``InvalidPathDataError``.

        Raises:
            TypeError: If ``value`` is not a string.
            InvalidPathDataError: If validation fails and ``on_error`` does not
                raise something else.
        """
        if not isinstance(value, str):
            raise TypeError(f"Filepath requires a str, got {type(value).__name__}")

        algebra = path_algebra if path_algebra is not None else default_path_algebra()
        normalized = algebra.normalize(value)

        try:
            accepted = validator(normalized)
        except InvalidPathDataError as error:
            logger.warning(
                "Rejected filepath data: %s",
                error.message,
                extra={"filepath": normalized, "base": base},
            )
            _ = on_error(error)
            raise

        object.__setattr__(self, "_value", accepted)
        object.__setattr__(self, "_base", base)
        object.__setattr__(self, "_path_algebra", algebra)
        object.__setattr__(self, "_validator", validator)
        object.__setattr__(self, "_on_error", on_error)
        object.__setattr__(self, "_parsed", None)

    # ------------------------------------------------------------------
    # accessors

    @property
    def value(self) -> str:
        """The normalized path string."""
        return self._value

    @property
    def base(self) -> str | None:
        """The path this Filepath is built from or relative to, if any."""
        return self._base

    @property
    def path_algebra(self) -> PathAlgebra:
        """The algebra used for all path operations."""
        return self._path_algebra

    # ------------------------------------------------------------------
    # decomposition

    def basename(self, ext: str | None = None) -> str:
        """Return the last portion of the path.

        Trailing separators are ignored.

        Args:
            ext: Extension to strip when the last portion ends with it.

        Returns:
            str: Final path segment, minus ``ext`` when it matched.
        """
        return self._path_algebra.basename(self._value, ext)

    def extname(self) -> str:
        """Return the extension of the final segment, or ``""``.

        Dotfiles such as ``.bashrc`` have no extension.
        """
        return self._path_algebra.extname(self._value)

    def dirname(
        self,
        *,
        base: str | None | Unset = UNSET,
        path_algebra: PathAlgebra | Unset = UNSET,
    ) -> Filepath:
        """Return the parent directory as a new Filepath."""
        return self._derive(
            self._path_algebra.dirname(self._value),
            FilepathOptions(base=base, path_algebra=path_algebra),
        )

    def parse(self) -> ParsedPath:
        """Return root, dir, base, name and ext; computed once per instance."""
        parsed = self._parsed
        if parsed is None:
            parsed = self._path_algebra.parse(self._value)
            object.__setattr__(self, "_parsed", parsed)
        return parsed

    # ------------------------------------------------------------------
    # composition

    def join(
        self,
        *segments: str,
        base: str | None | Unset = UNSET,
        path_algebra: PathAlgebra | Unset = UNSET,
    ) -> Filepath:
        """Append ``segments`` and normalize.

        Empty segments are skipped. The result is never empty: when
        everything collapses it is the current-directory token ``.``.
        """
        return self._derive(
            self._path_algebra.join(self._value, *segments),
            FilepathOptions(base=base, path_algebra=path_algebra),
        )

    def resolve(
        self,
        *segments: str,
        base: str | None | Unset = UNSET,
        path_algebra: PathAlgebra | Unset = UNSET,
    ) -> Filepath:
        """Return an absolute Filepath.

        Segments are processed right to left, stopping at the first
        absolute prefix; anything still relative is resolved against the
        working directory. Called with no segments, this Filepath is
        resolved against its ``base`` first, when it has one.
        """
        if segments:
            resolved = self._path_algebra.resolve(self._value, *segments)
        elif self._base is not None:
            resolved = self._path_algebra.resolve(self._base, self._value)
        else:
            resolved = self._path_algebra.resolve(self._value)

        return self._derive(resolved, FilepathOptions(base=base, path_algebra=path_algebra))

    def relative(self, to: Filepath | str) -> str:
        """Return the relative path from this Filepath to ``to``.

        Both sides are made absolute first. Equal paths give ``""``.
        """
        target = to.value if isinstance(to, Filepath) else to
        return self._path_algebra.relative(self._value, target)

    def is_absolute(self) -> bool:
        """Return whether this path is absolute."""
        return self._path_algebra.is_absolute(self._value)

    def to_namespaced_path(
        self,
        *,
        base: str | None | Unset = UNSET,
        path_algebra: PathAlgebra | Unset = UNSET,
    ) -> Filepath:
        """Return the namespaced form (``\\\\?\\`` prefix on Windows, unchanged elsewhere)."""
        return self._derive(
            self._path_algebra.to_namespaced_path(self._value),
            FilepathOptions(base=base, path_algebra=path_algebra),
        )

    def _derive(self, value: str, options: FilepathOptions) -> Filepath:
        """Build a new Filepath, inheriting whatever ``options`` leaves unset."""
        derived = Filepath(
            value,
            base=pick(options.base, self._base),
            path_algebra=pick(options.path_algebra, self._path_algebra),
            on_error=pick(options.on_error, self._on_error),
            validator=pick(options.validator, self._validator),
        )
        logger.debug(
            "Derived filepath from %s",
            self._value,
            extra={"filepath": derived.value, "base": derived.base},
        )
        return derived

    # ------------------------------------------------------------------
    # protocol support

    def __str__(self) -> str:
        return self._value

    def __fspath__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return (
            f"Filepath({self._value!r}, base={self._base!r}, "
            f"path_algebra={self._path_algebra!r})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Filepath):
            return NotImplemented
        return (
            self._value == other._value
            and self._base == other._base
            and self._path_algebra is other._path_algebra
        )

    def __hash__(self) -> int:
        return hash((self._value, self._base, id(self._path_algebra)))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"Filepath is immutable: cannot set '{name}'")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"Filepath is immutable: cannot delete '{name}'")


__all__ = ["Filepath"]
