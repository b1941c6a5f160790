"""Shared pytest fixtures for typed_filepath tests."""

from __future__ import annotations

import pytest

from path_algebra_doubles import RecordingPathAlgebra
from typed_filepath.algebra import PosixPathAlgebra, WindowsPathAlgebra
from typed_filepath.config import ENV_ALGEBRA


@pytest.fixture(autouse=True)
def _clear_algebra_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the host's algebra override out of every test."""

    monkeypatch.delenv(ENV_ALGEBRA, raising=False)


@pytest.fixture
def recording_algebra() -> RecordingPathAlgebra:
    """Provide a POSIX-backed algebra that records its calls."""

    return RecordingPathAlgebra()


@pytest.fixture
def posix() -> PosixPathAlgebra:
    """Provide a POSIX algebra with a fixed working directory."""

    return PosixPathAlgebra(cwd=lambda: "/work")


@pytest.fixture
def win32() -> WindowsPathAlgebra:
    """Provide a Windows algebra with a fixed working directory."""

    return WindowsPathAlgebra(cwd=lambda: "C:\\work")
