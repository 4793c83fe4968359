"""Configuration utilities for COURSECAT.

This module centralizes small helpers and constants related to application configuration.
All values are read from the environment at call time.
"""

import os

CATALOG_FILE_ENVVAR = "COURSECAT_FILE"  # pragma: no mutate
ENCODING_ENVVAR = "COURSECAT_ENCODING"  # pragma: no mutate
DEFAULT_ENCODING = "utf-8"  # pragma: no mutate


class CatalogPathNotSetError(Exception):
    """Raised when the COURSECAT_FILE environment variable is not set."""


def get_catalog_path() -> str:
    """Get the default catalog file path from the environment.

    Returns:
        The value of the `COURSECAT_FILE` environment variable.

    Raises:
        CatalogPathNotSetError: If `COURSECAT_FILE` is not set or empty.
    """
    if not (path := os.environ.get(CATALOG_FILE_ENVVAR)):
        raise CatalogPathNotSetError
    return path


def get_encoding() -> str:
    """Get the text encoding used to read catalog files.

    Returns:
        The value of `COURSECAT_ENCODING`, or ``"utf-8"`` when unset or empty.
    """
    return os.environ.get(ENCODING_ENVVAR) or DEFAULT_ENCODING
