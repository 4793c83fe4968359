"""Unit tests.

Purpose
- Verify a single module/class/function in isolation.

Guidelines
- Filesystem access only under ``tmp_path``; no network.
- Prefer behavior-centric assertions over implementation details.
- Keep tests small, fast, and deterministic.
"""
