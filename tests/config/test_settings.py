"""Tests for default path algebra selection."""

from __future__ import annotations

import pytest

from typed_filepath.algebra import POSIX, WIN32, native_path_algebra
from typed_filepath.config import (
    ENV_ALGEBRA,
    AlgebraName,
    default_path_algebra,
    resolve_algebra_name,
)


def test_defaults_to_native() -> None:
    assert resolve_algebra_name(env={}) is AlgebraName.NATIVE
    assert default_path_algebra(env={}) is native_path_algebra()


def test_explicit_name_wins_over_environment() -> None:
    name = resolve_algebra_name("posix", env={ENV_ALGEBRA: "win32"})
    assert name is AlgebraName.POSIX


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("posix", POSIX),
        ("win32", WIN32),
        (" Windows ", WIN32),
        ("POSIX", POSIX),
    ],
)
def test_environment_override(raw: str, expected: object) -> None:
    assert default_path_algebra(env={ENV_ALGEBRA: raw}) is expected


def test_blank_environment_value_is_ignored() -> None:
    assert resolve_algebra_name(env={ENV_ALGEBRA: "   "}) is AlgebraName.NATIVE


def test_reads_process_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(ENV_ALGEBRA, "win32")

    assert default_path_algebra() is WIN32


def test_unknown_name_lists_valid_options() -> None:
    with pytest.raises(ValueError, match="Valid options: native, posix, win32"):
        _ = resolve_algebra_name("vms")
