"""Interactive menu: ``coursecat menu``.

Drives a single catalog through a numbered prompt loop until the user picks
Exit or input ends. Load failures are reported and the loop keeps going, so a
corrected file can be loaded without restarting.
"""

from __future__ import annotations

import logging
from collections import deque
from pathlib import Path

import click

from coursecat.adapters.memory import InMemoryCourseCatalog
from coursecat.domain.course import format_course
from coursecat.domain.errors import CatalogError
from coursecat.interfaces.course_catalog import CourseCatalog

from .commands import NOT_FOUND_MSG
from .helpers import error, success, warn

logger = logging.getLogger(__name__)

MENU = "\n".join(
    [
        "Menu:",
        " 1. Load Courses",
        " 2. Print Course List",
        " 3. Find Course",
        " 4. Exit",
    ]
)

LOAD, PRINT, FIND, EXIT = "1", "2", "3", "4"  # pragma: no mutate

GOODBYE_MSG = "Exiting program. Good bye!"
INVALID_OPTION_MSG = "Invalid option."


def load_into(catalog: CourseCatalog, path: str | Path) -> bool:
    """Load `path` into `catalog`, reporting the outcome on stderr.

    Returns:
        bool: True if the catalog was replaced, False if it was left as it was.
    """
    try:
        count = catalog.load_path(path)
    except CatalogError as e:
        logger.debug("Load of %s failed", path, exc_info=True)
        error(str(e))
        return False
    success(f"Courses loaded ({count}).")
    return True


def print_all(catalog: CourseCatalog) -> None:
    """Echo every course in number order."""
    courses = catalog.list_all()
    if not courses:
        warn("No courses loaded.")
    for course in courses:
        click.echo(format_course(course))


def print_one(catalog: CourseCatalog, number: str) -> None:
    """Echo the course with `number`, or report that it is missing."""
    if (course := catalog.find_by_number(number)) is None:
        error(NOT_FOUND_MSG)
        return
    click.echo(format_course(course))


class WordReader:
    """Hand out whitespace-separated words typed at Click prompts.

    Words left over on a line answer the following prompts without asking
    again, so ``1 courses.csv`` picks Load and names the file in one go.
    """

    def __init__(self) -> None:
        self._pending: deque[str] = deque()

    def read(self, text: str, allow_empty: bool = False) -> str:
        """Return the next word, prompting with `text` when none is pending.

        Args:
            text: Prompt shown when a new line has to be read.
            allow_empty: Return ``""`` for a blank line instead of asking again.

        Raises:
            click.Abort: If input ends or the user interrupts the prompt.
        """
        while not self._pending:
            line = click.prompt(
                text, default="" if allow_empty else None, show_default=False
            )
            words = line.split()
            if not words and allow_empty:
                return ""
            self._pending.extend(words)
        return self._pending.popleft()


def run_menu(catalog: CourseCatalog) -> None:
    """Run the prompt loop against `catalog` until Exit or end of input."""
    reader = WordReader()
    while True:
        click.echo(MENU)
        try:
            choice = reader.read("Choose an option", allow_empty=True)
            click.echo()

            if choice == LOAD:
                load_into(catalog, reader.read("Enter a file to load"))
            elif choice == PRINT:
                print_all(catalog)
            elif choice == FIND:
                print_one(catalog, reader.read("Enter a course to search for"))
            elif choice == EXIT:
                break
            else:
                warn(INVALID_OPTION_MSG)
        except click.Abort:
            # end of input or Ctrl-C at a prompt
            click.echo()
            break
        click.echo()

    click.echo(GOODBYE_MSG)


@click.command()
@click.option(
    "--file",
    "-f",
    "path",
    type=click.Path(path_type=Path),
    default=None,
    help="Catalog file to load before the first prompt.",
)
def menu(path: Path | None) -> None:
    """Browse a course catalog interactively."""
    catalog = InMemoryCourseCatalog()
    if path is not None:
        load_into(catalog, path)
        click.echo()
    run_menu(catalog)
