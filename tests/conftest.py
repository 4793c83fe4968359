"""Global pytest fixtures for COURSECAT."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

# pylint: disable=unused-argument

TESTS_ROOT = Path(__file__).parent.resolve()

# directory directly under tests/ -> marker applied to everything inside it
DIRECTORY_MARKERS = {"unit": "unit", "contract": "contract", "e2e": "e2e"}

EXAMPLE_CATALOG = (
    "CS101,Intro to Programming\n"
    "CS201,Data Structures,CS101\n"
    "CS301,Algorithms,CS101,CS201\n"
)


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Add a default mark to each item based on its top-level test directory."""
    for item in items:
        path = item.path.resolve()
        if TESTS_ROOT not in path.parents:
            continue
        top = path.relative_to(TESTS_ROOT).parts[0]
        if (marker := DIRECTORY_MARKERS.get(top)) is None:
            continue
        if not any(m.name == marker for m in item.iter_markers()):
            item.add_marker(getattr(pytest.mark, marker))


@pytest.fixture
def example_text() -> str:
    """The three-course example catalog (CS101, CS201, CS301)."""
    return EXAMPLE_CATALOG


@pytest.fixture
def example_lines(example_text: str) -> list[str]:
    """The example catalog as a list of lines with terminators."""
    return example_text.splitlines(keepends=True)


@pytest.fixture
def write_catalog(tmp_path: Path) -> Callable[..., Path]:
    """Factory that writes catalog text to a file under ``tmp_path``.

    Example:
        ```py
        path = write_catalog("CS101,Intro\\n", name="courses.csv")
        ```
    """

    def _write(text: str, name: str = "courses.csv", encoding: str = "utf-8") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding=encoding)
        return path

    return _write
