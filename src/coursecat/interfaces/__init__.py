"""Interfaces (ports) for COURSECAT."""

from .course_catalog import CourseCatalog

__all__ = ["CourseCatalog"]
