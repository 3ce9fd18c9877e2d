"""User-facing lines for the helperkit CLI.

Notices (warnings, errors, confirmations) go to stderr behind a glyph that
falls back to ASCII on terminals that cannot encode it. Verdicts of the
``check`` commands go to stdout so they can be piped.
"""

import click

CAUTION_GLYPHS = ("⚠️", "[!]")
SUCCESS_GLYPHS = ("✅", "[OK]")
ERROR_GLYPHS = ("❌", "[X]")


def _supports_character(character: str) -> bool:
    encoding = getattr(click.get_text_stream("stderr"), "encoding", None) or "ascii"
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def _glyph(glyphs: tuple[str, str]) -> str:
    emoji, fallback = glyphs
    return emoji if _supports_character(emoji) else fallback


def warn(msg: str) -> None:
    """Yellow warning line on stderr, e.g. ``⚠️  VIES is unreachable.``"""
    click.secho(f"{_glyph(CAUTION_GLYPHS)}  {msg}", fg="yellow", bold=True, err=True)


def success(msg: str) -> None:
    click.secho(f"{_glyph(SUCCESS_GLYPHS)}  {msg}", fg="green", bold=True, err=True)


def error(msg: str) -> None:
    click.secho(f"{_glyph(ERROR_GLYPHS)}  {msg}", fg="red", bold=True, err=True)


def valid(subject: str) -> None:
    """Print ``<subject>: valid`` on stdout."""
    click.echo(f"{subject}: " + click.style("valid", fg="green"))


def invalid(subject: str) -> None:
    click.echo(f"{subject}: " + click.style("invalid", fg="red"))
