"""Contract tests.

Purpose
- Define CourseCatalog behavior once (load atomicity, exact lookup, sorted
  listing) and run it against every implementation.

Guidelines
- Parametrize implementations via the ``catalog`` fixture.
- Assert only the public contract (inputs/outputs/effects), not internals.
"""
