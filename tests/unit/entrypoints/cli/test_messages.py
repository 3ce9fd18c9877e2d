"""Unit tests for :mod:`helperkit.entrypoints.cli.helpers.messages`.

This suite verifies that:

1) Emoji/ASCII glyph selection respects the *current* stderr encoding
   reported by ``click.get_text_stream("stderr")``, re-queried on every call.
2) ``warn``/``success``/``error`` emit styled lines to **stderr**.
3) ``valid``/``invalid`` verdicts go to **stdout**.
"""

import io
import sys

import click
import pytest

from helperkit.entrypoints.cli.helpers.messages import (
    CAUTION_GLYPHS,
    ERROR_GLYPHS,
    SUCCESS_GLYPHS,
    _glyph,
    _supports_character,
    error,
    invalid,
    success,
    valid,
    warn,
)

SET_YELLOW = "\x1b[33m"
SET_GREEN = "\x1b[32m"
SET_RED = "\x1b[31m"
SET_BOLD = "\x1b[1m"
RESET = "\x1b[0m"


class FakeTTY(io.StringIO):
    """A text stream that mimics a TTY and exposes a controllable encoding."""

    def __init__(self, encoding: str):
        super().__init__()
        self._encoding = encoding

    @property
    def encoding(self) -> str:
        return self._encoding

    def isatty(self) -> bool:
        """Report a TTY so Click keeps the ANSI styles."""
        return True


@pytest.mark.parametrize(
    ("encoding", "expected"),
    [
        ("ascii", ("[!]", "[OK]", "[X]")),
        ("utf-8", ("⚠️", "✅", "❌")),
    ],
)
def test_glyphs_respect_stream_encoding(monkeypatch, encoding, expected):
    stream = FakeTTY(encoding)
    monkeypatch.setattr(click, "get_text_stream", lambda name: stream)

    assert tuple(_glyph(glyphs) for glyphs in (CAUTION_GLYPHS, SUCCESS_GLYPHS, ERROR_GLYPHS)) == expected


def test_supports_character_requeries_stream_each_call(monkeypatch):
    """The stream is fetched again on every call, never cached."""
    calls: list[str] = []

    def stream_factory(name: str):  # pylint: disable=unused-argument
        enc = "ascii" if not calls else "utf-8"
        calls.append(enc)
        return FakeTTY(enc)

    monkeypatch.setattr(click, "get_text_stream", stream_factory)

    assert _supports_character("⚠️") is False
    assert _supports_character("⚠️") is True
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
    """Probe and writer share one FakeTTY so glyph choice and output agree."""
    stream = FakeTTY(encoding)
    monkeypatch.setattr(click, "get_text_stream", lambda name: stream)
    monkeypatch.setattr(sys, "stderr", stream, raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)
    monkeypatch.setenv("CLICOLOR", "1")

    func("VIES is unreachable")

    out = stream.getvalue()
    assert glyph in out
    assert "VIES is unreachable" in out
    assert SET_BOLD in out
    assert color_code in out
    assert RESET in out


def test_warn_writes_to_stderr_only(monkeypatch, capsys):
    monkeypatch.setattr(click, "get_text_stream", lambda name: FakeTTY("utf-8"))
    warn("checked locally")
    captured = capsys.readouterr()
    assert "checked locally" in captured.err
    assert captured.out == ""


def test_verdicts_go_to_stdout(capsys):
    valid("FR44732829320")
    invalid("FR45732829320")
    captured = capsys.readouterr()

    assert captured.out.splitlines() == ["FR44732829320: valid", "FR45732829320: invalid"]
    assert captured.err == ""
