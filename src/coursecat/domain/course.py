"""Course record and its display format."""

from __future__ import annotations

from dataclasses import dataclass, field

PREREQUISITES_LABEL = "\t Prerequisites: "  # pragma: no mutate
PREREQUISITE_SEPARATOR = ", "  # pragma: no mutate


@dataclass(frozen=True, slots=True)
class Course:
    """Immutable read model for one course parsed from a catalog file.

    Conventions:
      - `number` is kept exactly as read (no case folding, no trimming).
      - `prerequisites` holds course numbers in the order they appear on the line.
      - `line` is the 1-based source line, None when built by hand.
        It is diagnostic only and does not take part in equality.
    """

    number: str
    name: str
    prerequisites: tuple[str, ...] = ()
    line: int | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        # accept any sequence from callers but store a tuple
        object.__setattr__(self, "prerequisites", tuple(self.prerequisites))


def format_course(course: Course) -> str:
    """Render a course the way the catalog prints it.

    The first line is ``"<number>: <name>"``. When the course has
    prerequisites a second line follows: a tab, ``" Prerequisites: "`` and the
    prerequisite numbers joined by ``", "``.

    Args:
        course: The course to render.

    Returns:
        str: One or two lines of text, without a trailing newline.

    Example:
        ```
        CS301: Algorithms
        	 Prerequisites: CS101, CS201
        ```
    """
    text = f"{course.number}: {course.name}"
    if course.prerequisites:
        text += "\n" + PREREQUISITES_LABEL + PREREQUISITE_SEPARATOR.join(
            course.prerequisites
        )
    return text
