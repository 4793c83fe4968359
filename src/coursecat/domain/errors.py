"""Domain-layer error definitions."""

from __future__ import annotations

from pathlib import Path

# ============================================================================
#                           General catalog errors
# ============================================================================


class CatalogError(Exception):
    """Base class for all course catalog errors."""


class OpenError(CatalogError):
    """Raised when a catalog source cannot be opened for reading.

    The message is always ``Error opening file: <path>``; the underlying
    failure is kept on `reason` for logs and callers that want it.
    """

    def __init__(self, path: str | Path, reason: str | None = None) -> None:
        super().__init__(f"Error opening file: {path}")
        self.path = path
        self.reason = reason


# ============================================================================
#                       Validation errors raised while loading
# ============================================================================


class LoadError(CatalogError):
    """Base class for errors that abort a load because the source is invalid."""

    def __init__(self, message: str, line: int) -> None:
        super().__init__(f"{message} (line {line}).")
        self.line = line


class MalformedRecordError(LoadError):
    """Raised when a non-empty line has a course number but no course name."""

    def __init__(self, line: int, number: str) -> None:
        super().__init__("Course is missing a course number or course name", line)
        self.number = number


class UnknownPrerequisiteError(LoadError):
    """Raised when a prerequisite does not match any course number in the source."""

    def __init__(self, line: int, number: str, prerequisite: str) -> None:
        super().__init__(f"Invalid prerequisite {prerequisite!r}", line)
        self.number = number
        self.prerequisite = prerequisite
