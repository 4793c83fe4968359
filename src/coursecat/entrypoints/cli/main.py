"""COURSECAT CLI entry point.

Defines the top-level ``coursecat`` command (via Click-Extra) and registers
its subcommands.

Currently available commands
- ``coursecat list``: print every course in a catalog file, sorted by number.
- ``coursecat find NUMBER``: print one course from a catalog file.
- ``coursecat menu``: interactive Load / Print / Find loop.

Notes
- The CLI version is sourced from `coursecat.__version__` and displayed
  automatically by Click-Extra (``--version``).
- Additional commands should be registered here via ``coursecat.add_command(...)``.

Examples
    $ coursecat --version
    $ coursecat list --file courses.csv
    $ COURSECAT_FILE=courses.csv coursecat find CS201
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click
import click_extra as clickx
from platformdirs import user_log_dir

from coursecat import __version__, config
from coursecat.logging import config_console_handler, config_flight_recorder, log_startup

from .commands import find, list_courses
from .helpers.log_level_parser import parse_log_level
from .menu import menu

if TYPE_CHECKING:
    from logging import Handler

logger = logging.getLogger(__name__)


HELP = """COURSECAT command-line interface.

    Load a comma-delimited course catalog (number, name, prerequisites),
    check that every prerequisite refers to a course in the same file, and
    list or look up courses.
    """


EPILOG = "\b\n" + "\n".join(
    [
        f"{click.style('Environment:', fg='blue', bold=True, underline=True)}",
        "  COURSECAT_FILE     : default catalog file for list/find",
        "  COURSECAT_ENCODING : catalog file encoding (default utf-8)",
    ]
)


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
    epilog=EPILOG,
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help=(
        "Increase the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help=(
        "Decrease the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (enables extra developer diagnostics beyond -vv).",
    default=False,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to log file (overrides default flight recorder path).",
    default=Path(user_log_dir("coursecat", appauthor=False, ensure_exists=True))
    / "latest.log",
    envvar="COURSECAT_LOG_PATH",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "--flight-recorder-capacity",
    type=int,
    default=2000,
    hidden=True,
    envvar="COURSECAT_FLIGHT_RECORDER_CAPACITY",
    show_envvar=True,
    help="Capacity of the flight recorder (in number of log records).",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    help=(
        "Enable the in-memory flight recorder. Keeps the last N log records "
        "(tunable via COURSECAT_FLIGHT_RECORDER_CAPACITY) at DEBUG granularity "
        "(unaffected by -v/-q) and writes them to --log-path when a WARNING/ERROR "
        "occurs, or on clean exit if --force-flush is set."
    ),
    default=True,
    envvar="COURSECAT_FLIGHT_RECORDER",
    show_envvar=True,
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    is_flag=True,
    help=(
        "Force-flush the flight recorder buffer to --log-path on program exit. "
        "Normally the buffer only dumps on WARNING/ERROR."
    ),
    default=False,
    envvar="COURSECAT_FORCE_FLUSH",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    help=(
        "Set MINIMUM LEVEL for specific LOGGERS (NAME=LEVEL). Applies to both "
        "console and flight-recorder. Repeatable (e.g. -L coursecat.adapters=DEBUG) "
        "or via COURSECAT_LOGGER_LEVELS (space separated list)."
    ),
    default=("click_extra=WARNING",),
    envvar="COURSECAT_LOGGER_LEVELS",
    show_default=True,
    show_envvar=True,
)
@clickx.pass_context
def coursecat(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush_flight_recorder: bool,
    logger_levels: dict[str, int],
) -> None:
    """COURSECAT command-line interface."""

    # 0) compute effective verbosity
    base_level = logging.WARNING
    level = base_level - (10 * verbose_count) + (10 * quiet_count)
    level = max(logging.DEBUG, min(logging.CRITICAL, level))

    handlers: list[Handler] = []

    # 1) configure console handler
    use_color = ctx.color is not False  # None or True => allow color
    handlers.append(
        config_console_handler(level=level, debug_mode=debug, color=use_color)
    )

    # 2) configure flight recorder
    if flight_recorder:
        handlers.append(
            config_flight_recorder(
                path=log_path,
                capacity=flight_recorder_capacity,
                flush_on_close=force_flush_flight_recorder,
            )
        )

    # 3) root logger captures everything; handlers filter
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)

    # 4) per-logger levels
    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)

    # 5) startup info
    try:
        catalog_path: str | None = config.get_catalog_path()
    except config.CatalogPathNotSetError:
        catalog_path = None

    log_startup(
        logger,
        app_version=__version__,
        level=level,
        handlers=handlers,
        log_path=log_path,
        flight_recorder=flight_recorder,
        flight_capacity=flight_recorder_capacity if flight_recorder else None,
        force_flush_fr=force_flush_flight_recorder,
        logger_levels=logger_levels,
        encoding=config.get_encoding(),
        catalog_path=catalog_path,
    )

    # 6) flush/close handlers once the subcommand returns
    ctx.call_on_close(logging.shutdown)


coursecat.add_command(list_courses)
coursecat.add_command(find)
coursecat.add_command(menu)
