"""Unit tests for :mod:`coursecat.entrypoints.cli.helpers.messages`.

1) Emoji/ASCII glyph selection follows the encoding reported by
   ``click.get_text_stream("stderr")``, re-queried on every call.
2) ``warn``/``success``/``error`` emit styled lines to **stderr** only.
"""

import io
import sys

import click
import pytest

from coursecat.entrypoints.cli.helpers.messages import (
    _supports_character,
    caution_glyph,
    error,
    error_glyph,
    success,
    success_glyph,
    warn,
)

SET_YELLOW = "\x1b[33m"
SET_GREEN = "\x1b[32m"
SET_RED = "\x1b[31m"
SET_BOLD = "\x1b[1m"
RESET = "\x1b[0m"


class FakeTTY(io.StringIO):
    """A text stream that claims to be a TTY with a chosen encoding."""

    def __init__(self, encoding: str):
        super().__init__()
        self._encoding = encoding

    @property
    def encoding(self) -> str:  # type: ignore[override]
        """Declared character encoding (e.g., ``'ascii'`` or ``'utf-8'``)."""
        return self._encoding

    def isatty(self) -> bool:
        """Report a TTY so Click keeps ANSI styling."""
        return True


@pytest.mark.parametrize(
    ("encoding", "expected"),
    [
        ("ascii", ("[!]", "[OK]", "[X]")),
        ("utf-8", ("⚠️", "✅", "❌")),
    ],
)
def test_glyphs_respect_stream_encoding(monkeypatch, encoding, expected):
    """Glyph helpers choose emoji or ASCII according to the stderr encoding."""
    stream = FakeTTY(encoding)
    monkeypatch.setattr(click, "get_text_stream", lambda name: stream)

    assert (caution_glyph(), success_glyph(), error_glyph()) == expected


def test_supports_character_requeries_stream_each_call(monkeypatch):
    """_supports_character consults Click's stream on every call."""
    calls: list[str] = []

    def stream_factory(name: str):  # pylint: disable=unused-argument
        enc = "ascii" if not calls else "utf-8"
        calls.append(enc)
        return FakeTTY(enc)

    monkeypatch.setattr(click, "get_text_stream", stream_factory)

    assert _supports_character("✅") is False
    assert _supports_character("✅") is True
    assert calls == ["ascii", "utf-8"]


@pytest.mark.parametrize(
    ("encoding", "glyph", "color_code", "func"),
    [
        ("ascii", "[!]", SET_YELLOW, warn),
        ("utf-8", "⚠️", SET_YELLOW, warn),
        ("ascii", "[OK]", SET_GREEN, success),
        ("utf-8", "✅", SET_GREEN, success),
        ("ascii", "[X]", SET_RED, error),
        ("utf-8", "❌", SET_RED, error),
    ],
)
def test_messages_emit_styled_stderr(monkeypatch, encoding, glyph, color_code, func):
    """Each helper writes a bold, colored line with the right glyph."""
    stream = FakeTTY(encoding)
    monkeypatch.setattr(click, "get_text_stream", lambda name: stream)
    monkeypatch.setattr(sys, "stderr", stream, raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)
    monkeypatch.setenv("CLICOLOR", "1")

    func("Course not found.")

    out = stream.getvalue()
    assert "Course not found." in out
    assert glyph in out
    assert SET_BOLD in out
    assert color_code in out
    assert RESET in out


@pytest.mark.parametrize("func", [warn, success, error])
def test_messages_leave_stdout_untouched(monkeypatch, capsys, func):
    """Status lines go to stderr so stdout stays clean for course listings."""
    monkeypatch.setattr(click, "get_text_stream", lambda name: FakeTTY("utf-8"))
    func("Courses loaded (3).")
    captured = capsys.readouterr()
    assert "Courses loaded (3)." in captured.err
    assert captured.out == ""
