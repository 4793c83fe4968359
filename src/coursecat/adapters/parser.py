"""Two-pass parser for comma-delimited course catalog text.

Each non-empty line has the form ``<number>,<name>[,<prereq>...]``. Fields are
split on a literal comma with no quoting, escaping, or whitespace trimming.

Pass 1 collects the first field of every non-empty line as the set of known
course numbers. Pass 2 builds the courses and checks every prerequisite
against that set, so a prerequisite may refer to a course defined later in
the file. Both passes run over the same in-memory list of lines.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from coursecat.domain.course import Course
from coursecat.domain.errors import MalformedRecordError, UnknownPrerequisiteError

logger = logging.getLogger(__name__)

DELIMITER = ","  # pragma: no mutate
LINE_TERMINATORS = "\r\n"  # pragma: no mutate


def strip_terminator(line: str) -> str:
    """Remove the trailing line terminator, leaving all other characters."""
    return line.rstrip(LINE_TERMINATORS)


def split_fields(line: str) -> list[str]:
    """Split a catalog line into its fields.

    A single trailing delimiter does not open an extra empty field, so
    ``"CS101,Intro,"`` yields ``["CS101", "Intro"]``. Empty fields anywhere
    else are kept.

    Args:
        line: One line of catalog text without its terminator.

    Returns:
        list[str]: The fields in order. Never empty.
    """
    fields = line.split(DELIMITER)
    if len(fields) > 1 and fields[-1] == "":
        fields.pop()
    return fields


def collect_numbers(lines: Iterable[str]) -> set[str]:
    """Pass 1: gather the first field of every non-empty line."""
    return {split_fields(line)[0] for line in lines if line}


def parse_courses(lines: Iterable[str]) -> list[Course]:
    """Parse and validate catalog lines into courses.

    Args:
        lines: Catalog lines, with or without line terminators. A single
            `str` is refused rather than read one character per line; split
            it with `str.splitlines` first.

    Returns:
        list[Course]: Courses in line order.

    Raises:
        TypeError: If `lines` is a `str`.
        MalformedRecordError: If a non-empty line has a number but no name.
        UnknownPrerequisiteError: If a prerequisite is not the number of any
            course in `lines`.
    """
    if isinstance(lines, str):
        raise TypeError("expected an iterable of lines, not a single str")
    buffered = [strip_terminator(line) for line in lines]
    known = collect_numbers(buffered)
    logger.debug("Pass 1 found %d distinct course numbers", len(known))

    courses: list[Course] = []
    seen: set[str] = set()
    for lineno, line in enumerate(buffered, start=1):
        if not line:
            continue

        number, *rest = split_fields(line)
        if not rest:
            raise MalformedRecordError(lineno, number)
        name, *prerequisites = rest

        for prerequisite in prerequisites:
            if prerequisite not in known:
                raise UnknownPrerequisiteError(lineno, number, prerequisite)

        if number in seen:
            logger.warning(
                "Duplicate course number %r on line %d; lookups return the first one",
                number,
                lineno,
            )
        seen.add(number)
        courses.append(Course(number, name, tuple(prerequisites), line=lineno))

    return courses
