"""Adapters for COURSECAT: catalog file access, parsing, and in-memory storage."""
