"""Command-line interface for COURSECAT."""
