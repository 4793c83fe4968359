"""In-memory CourseCatalog implementation."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from operator import attrgetter
from pathlib import Path

from coursecat import config
from coursecat.domain.course import Course
from coursecat.interfaces.course_catalog import CourseCatalog

from .parser import parse_courses
from .source import read_lines

logger = logging.getLogger(__name__)


class InMemoryCourseCatalog(CourseCatalog):
    """Course catalog held in a list, in the order the courses were loaded.

    A load parses into a fresh list and only swaps it in once every line has
    been validated, so a failed load keeps the previous courses.
    """

    def __init__(self, courses: Iterable[Course] = ()) -> None:
        self._courses: list[Course] = list(courses)

    def load(self, source: Iterable[str]) -> int:
        courses = parse_courses(source)
        self._courses = courses
        logger.info("Loaded %d courses", len(courses))
        return len(courses)

    def load_path(self, path: str | Path, encoding: str | None = None) -> int:
        logger.debug("Loading catalog from %s", path)
        lines = read_lines(path, encoding or config.get_encoding())
        return self.load(lines)

    def find_by_number(self, number: str) -> Course | None:
        for course in self._courses:
            if course.number == number:
                return course
        logger.debug("Course %r not found", number)
        return None

    def list_all(self) -> list[Course]:
        return sorted(self._courses, key=attrgetter("number"))

    def __len__(self) -> int:
        return len(self._courses)

    def __iter__(self) -> Iterator[Course]:
        return iter(self._courses)
