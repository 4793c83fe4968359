"""Fixtures and test helpers for end-to-end CLI tests.

Provides a test-only `log-demo` Click command that emits log messages, plus
fixtures to register that command, obtain a CliRunner, run tests within an
isolated filesystem, and write catalog files into it.
"""

import logging
from pathlib import Path

import click
import pytest
from click.testing import CliRunner

from coursecat.entrypoints.cli.main import coursecat

# pylint: disable=redefined-outer-name, unused-argument


@click.command()
def log_demo():
    """Emit representative log messages for CLI/flight-recorder tests.

    Emits DEBUG/INFO/WARNING/ERROR/CRITICAL messages on the 'coursecat.demo'
    logger and additional messages on a 'some.thirdparty' logger to exercise
    logger-level filtering and flight-recorder behavior.
    """
    logger = logging.getLogger("coursecat.demo")
    logger.debug("This is a debug-level test message.")
    logger.info("This is an info-level test message.")
    logger.warning("This is a warning-level test message.")
    logger.error("This is an error-level test message.")
    logger.critical("This is a critical-level test message.")
    third_party_logger = logging.getLogger("some.thirdparty")
    third_party_logger.debug("This is a debug-level third-party test message.")
    third_party_logger.info("This is an info-level third-party test message.")
    third_party_logger.warning("This is a warning-level third-party test message.")
    logger.debug("This is a final debug-level test message.")


def _remove_command_everywhere(group, name: str) -> None:
    """Remove a command from a Click group and any sections Click-Extra keeps."""
    group.commands.pop(name, None)
    if hasattr(group, "_default_section"):
        group._default_section.commands.pop(name, None)  # pylint: disable=protected-access
    for sec in getattr(group, "_sections", []):
        getattr(sec, "commands", {}).pop(name, None)


@pytest.fixture
def registered_log_demo():
    """Register the 'log-demo' command for the duration of a test."""
    coursecat.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        _remove_command_everywhere(coursecat, "log-demo")


@pytest.fixture
def runner():
    """Return a CliRunner whose flight recorder writes inside the test directory."""
    return CliRunner(env={"COURSECAT_LOG_PATH": "coursecat.log"})


@pytest.fixture
def fs(runner):
    """Run the test inside ``runner.isolated_filesystem()``."""
    with runner.isolated_filesystem():
        yield


@pytest.fixture
def catalog_file(fs, example_text) -> Path:
    """Write the three-course example catalog into the isolated filesystem."""
    path = Path("courses.csv")
    path.write_text(example_text, encoding="utf-8")
    return path


@pytest.fixture
def bad_catalog_file(fs) -> Path:
    """Write a catalog whose second line names an unknown prerequisite."""
    path = Path("bad.csv")
    path.write_text("CS101,Intro\nCS201,Data Structures,CS999\n", encoding="utf-8")
    return path
