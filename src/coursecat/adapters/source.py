"""Local filesystem access for catalog source files."""

from __future__ import annotations

import logging
from pathlib import Path

from coursecat.domain.errors import OpenError

logger = logging.getLogger(__name__)


def read_lines(path: str | Path, encoding: str = "utf-8") -> list[str]:
    """Read a catalog file into memory, one item per line.

    The file is closed before this function returns, whether or not reading
    succeeded. Line terminators are left on each item.

    Args:
        path: Location of the catalog file.
        encoding: Text encoding used to decode the file.

    Returns:
        list[str]: The file's lines in order.

    Raises:
        OpenError: If the file cannot be opened or decoded, or `path` is not a
            usable file name (e.g. it contains a NUL byte).
    """
    path = Path(path)
    try:
        with path.open("r", encoding=encoding) as fh:
            lines = list(fh)
    except (OSError, UnicodeDecodeError, LookupError, ValueError) as e:
        logger.debug("Failed to read %s: %s", path, e)
        raise OpenError(path, type(e).__name__) from e
    logger.debug("Read %d lines from %s", len(lines), path)
    return lines
