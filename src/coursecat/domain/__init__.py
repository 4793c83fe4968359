"""Domain model for COURSECAT: the course record and its errors."""

from .course import Course, format_course
from .errors import (
    CatalogError,
    LoadError,
    MalformedRecordError,
    OpenError,
    UnknownPrerequisiteError,
)

__all__ = [
    "Course",
    "format_course",
    "CatalogError",
    "LoadError",
    "MalformedRecordError",
    "OpenError",
    "UnknownPrerequisiteError",
]
