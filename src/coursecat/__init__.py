"""COURSECAT

An in-memory course catalog loader. It reads a comma-delimited course file,
checks that every prerequisite names a course defined in the same file, and
answers sorted listings and point lookups against the loaded catalog.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
