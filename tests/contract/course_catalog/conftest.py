"""Pytest fixtures for CourseCatalog contract tests.

Provided fixtures
-----------------
- **catalog**: Parametrized factory that returns a **fresh**, empty
  `CourseCatalog` per test. Currently supports `"memory"` (the in-memory
  implementation). To exercise additional implementations later, add
  their keys to the `params` list and branch in the fixture body.
- **loaded_catalog**: `catalog` with the three-course example loaded.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from coursecat.adapters.memory import InMemoryCourseCatalog

if TYPE_CHECKING:
    from coursecat.interfaces.course_catalog import CourseCatalog

# pylint: disable=redefined-outer-name


@pytest.fixture(params=["memory"])
def catalog(request: pytest.FixtureRequest) -> CourseCatalog:
    """Return a fresh course catalog instance for the requested backend.

    Current params:
      - `"memory"` → `InMemoryCourseCatalog`
    """

    match request.param:
        case "memory":
            return InMemoryCourseCatalog()
        case _:
            raise ValueError(f"unknown catalog type: {request.param}")


@pytest.fixture
def loaded_catalog(catalog: CourseCatalog, example_lines: list[str]) -> CourseCatalog:
    """Return `catalog` after loading the example courses."""
    catalog.load(example_lines)
    return catalog
