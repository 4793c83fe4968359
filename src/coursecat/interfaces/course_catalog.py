"""Defines the interface for course catalogs."""

from __future__ import annotations

import abc
from collections.abc import Iterable, Iterator
from pathlib import Path

from coursecat.domain.course import Course


class CourseCatalog(abc.ABC):
    """A set of courses replaced wholesale by each successful load."""

    @abc.abstractmethod
    def load(self, source: Iterable[str]) -> int:
        """Parse and validate `source`, then replace the catalog with its courses.

        Args:
            source: Lines of catalog text, e.g. an open text stream. A single
                `str` is not a source; split it into lines first.

        Returns:
            The number of courses loaded.

        Raises:
            TypeError: If `source` is a `str`.
            MalformedRecordError: If a non-empty line has no course name.
            UnknownPrerequisiteError: If a prerequisite names no course in `source`.

        Note:
            When an error is raised the previously loaded courses are kept.
        """

    @abc.abstractmethod
    def load_path(self, path: str | Path, encoding: str | None = None) -> int:
        """Open `path` and load it like `load`.

        Args:
            path: Location of the catalog file.
            encoding: Text encoding; defaults to the configured encoding.

        Returns:
            The number of courses loaded.

        Raises:
            OpenError: If the file cannot be opened. The catalog is untouched.
            LoadError: As raised by `load`.
        """

    @abc.abstractmethod
    def find_by_number(self, number: str) -> Course | None:
        """Get the first course whose number equals `number` exactly.

        Args:
            number: The course number, compared case-sensitively and untrimmed.

        Returns:
            The course if found, otherwise None.
        """

    @abc.abstractmethod
    def list_all(self) -> list[Course]:
        """Get every course sorted by number.

        Returns:
            A new list ordered by `number`; courses sharing a number keep
            their load order.
        """

    @abc.abstractmethod
    def __len__(self) -> int:
        """Number of courses currently loaded."""

    @abc.abstractmethod
    def __iter__(self) -> Iterator[Course]:
        """Iterate over courses in load order."""
