"""One-shot catalog commands: ``coursecat list`` and ``coursecat find``.

Each command loads the catalog file, answers one query, and exits. Course
text goes to **stdout**; status and diagnostics go to **stderr**.

Catalog file resolution
- ``--file PATH`` when given.
- Otherwise ``COURSECAT_FILE`` (see ``coursecat.config``).

Failure modes
- Neither ``--file`` nor ``COURSECAT_FILE`` → usage error (exit 2).
- File cannot be opened, or fails validation → ``ClickException`` (exit 1).
- ``find`` with an unknown course number → "Course not found." (exit 1).
"""

from __future__ import annotations

import logging
from pathlib import Path

import click

from coursecat import config
from coursecat.adapters.memory import InMemoryCourseCatalog
from coursecat.domain.course import format_course
from coursecat.domain.errors import CatalogError

from .helpers import error, success, warn

logger = logging.getLogger(__name__)

MISSING_CATALOG_FILE_MSG = (
    "No catalog file given and COURSECAT_FILE is not set.\n\n"
    "Pass one with --file, or set it before running this command, e.g.:\n"
    "  export COURSECAT_FILE='courses.csv'\n"
    "  or in PowerShell:\n"
    "  $env:COURSECAT_FILE='courses.csv'"
)

NOT_FOUND_MSG = "Course not found."

file_option = click.option(
    "--file",
    "-f",
    "path",
    type=click.Path(path_type=Path),
    default=None,
    help="Catalog file to load (defaults to $COURSECAT_FILE).",
)


def _resolve_path(path: Path | None) -> Path:
    if path is not None:
        return path
    try:
        return Path(config.get_catalog_path())
    except config.CatalogPathNotSetError as e:
        raise click.UsageError(MISSING_CATALOG_FILE_MSG) from e


def _load_catalog(path: Path | None) -> InMemoryCourseCatalog:
    path = _resolve_path(path)
    catalog = InMemoryCourseCatalog()
    try:
        count = catalog.load_path(path)
    except CatalogError as e:
        logger.debug("Load of %s failed", path, exc_info=True)
        raise click.ClickException(str(e)) from e
    success(f"Courses loaded ({count}).")
    return catalog


@click.command(name="list")
@file_option
def list_courses(path: Path | None) -> None:
    """Print every course, sorted by course number."""
    catalog = _load_catalog(path)
    courses = catalog.list_all()
    if not courses:
        warn("The catalog file has no courses.")
    for course in courses:
        click.echo(format_course(course))


@click.command()
@click.argument("number")
@file_option
@click.pass_context
def find(ctx: click.Context, number: str, path: Path | None) -> None:
    """Print the course with course number NUMBER."""
    catalog = _load_catalog(path)
    if (course := catalog.find_by_number(number)) is None:
        error(NOT_FOUND_MSG)
        ctx.exit(1)
    click.echo(format_course(course))
