"""Entrypoints for COURSECAT."""
