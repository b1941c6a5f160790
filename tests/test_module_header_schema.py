"""
Summary: Validate Summary/Why header docstring schema for selected modules.
Why: Prevent regression to inconsistent header formats across touched files.
"""

from __future__ import annotations

from pathlib import Path

import pytest

HEADER_OPEN: str = '"""'
HEADER_CLOSE: str = '"""'
SUMMARY_PREFIX: str = "Summary: "
WHY_PREFIX: str = "Why: "
SUMMARY_OFFSET: int = 1
WHY_OFFSET: int = 2
CLOSE_OFFSET: int = 3
HEADER_LENGTH: int = 4

REPO_ROOT: Path = Path(__file__).resolve().parents[1]

TARGET_MODULES: tuple[Path, ...] = (
    Path("src/typed_filepath/__init__.py"),
    Path("src/typed_filepath/algebra/__init__.py"),
    Path("src/typed_filepath/algebra/ports.py"),
    Path("src/typed_filepath/algebra/stdlib.py"),
    Path("src/typed_filepath/domain/__init__.py"),
    Path("src/typed_filepath/domain/errors.py"),
    Path("src/typed_filepath/domain/factory.py"),
    Path("src/typed_filepath/domain/filepath.py"),
    Path("src/typed_filepath/domain/options.py"),
    Path("src/typed_filepath/domain/validation.py"),
    Path("tests/algebra/test_posix_algebra.py"),
    Path("tests/domain/test_filepath.py"),
    Path("tests/test_module_header_schema.py"),
)

# config and platform modules document where they sit instead
WHERE_WHAT_WHY_MODULES: tuple[Path, ...] = (
    Path("src/typed_filepath/config/__init__.py"),
    Path("src/typed_filepath/config/settings.py"),
    Path("src/typed_filepath/platform/__init__.py"),
    Path("src/typed_filepath/platform/logging/__init__.py"),
    Path("src/typed_filepath/platform/logging/config.py"),
    Path("src/typed_filepath/platform/logging/handlers.py"),
)
WHERE_PREFIX: str = "Where: "
WHAT_PREFIX: str = "What: "


@pytest.mark.parametrize("module_path", TARGET_MODULES, ids=lambda path: str(path))
def test_module_headers_follow_summary_why_schema(module_path: Path) -> None:
    """Ensure module header docstring uses Summary and Why lines."""

    content_lines = (REPO_ROOT / module_path).read_text(encoding="utf-8").splitlines()
    start_index = next(
        (index for index, line in enumerate(content_lines) if line.strip()),
        None,
    )
    assert start_index is not None, f"{module_path} must not be empty"

    assert len(content_lines) >= start_index + HEADER_LENGTH, (
        f"{module_path} must provide at least {HEADER_LENGTH} header lines"
    )

    opening_line = content_lines[start_index].strip()
    assert opening_line == HEADER_OPEN, f"{module_path} must start with header docstring"

    summary_line = content_lines[start_index + SUMMARY_OFFSET]
    why_line = content_lines[start_index + WHY_OFFSET]
    closing_line = content_lines[start_index + CLOSE_OFFSET].strip()

    assert summary_line.startswith(SUMMARY_PREFIX), (
        f"{module_path} summary line must begin with '{SUMMARY_PREFIX}'"
    )
    assert why_line.startswith(WHY_PREFIX), (
        f"{module_path} why line must begin with '{WHY_PREFIX}'"
    )
    assert closing_line == HEADER_CLOSE, (
        f"{module_path} header must close with triple quotes"
    )

    assert summary_line.removeprefix(SUMMARY_PREFIX).strip(), (
        f"{module_path} summary text cannot be empty"
    )
    assert why_line.removeprefix(WHY_PREFIX).strip(), (
        f"{module_path} why text cannot be empty"
    )


@pytest.mark.parametrize("module_path", WHERE_WHAT_WHY_MODULES, ids=lambda path: str(path))
def test_layer_headers_name_their_location(module_path: Path) -> None:
    """Ensure the docstring opens with a title, then Where/What/Why lines."""

    content = (REPO_ROOT / module_path).read_text(encoding="utf-8")
    assert content.startswith(HEADER_OPEN), f"{module_path} must start with header docstring"

    header = content[len(HEADER_OPEN) :].split(HEADER_CLOSE, 1)[0]
    lines = header.splitlines()
    assert lines[0].strip(), f"{module_path} header needs a title line"
    assert not lines[1].strip(), f"{module_path} title must be followed by a blank line"

    prefixes = [line.split(":", 1)[0] + ": " for line in lines[2:5]]
    assert prefixes == [WHERE_PREFIX, WHAT_PREFIX, WHY_PREFIX], (
        f"{module_path} must list Where, What and Why in order"
    )

    expected_where = module_path.relative_to("src/typed_filepath").as_posix()
    assert lines[2].removeprefix(WHERE_PREFIX) == expected_where, (
        f"{module_path} Where line must name the module"
    )
