"""``helperkit file`` - sizes and MIME types."""

from __future__ import annotations

from pathlib import Path

import click
import click_extra as clickx

from helperkit.config import get_settings
from helperkit.domain.files import file as files


@click.group(cls=clickx.ExtraGroup)
def file() -> None:
    """File-related helpers."""


@file.command()
@click.argument("size", type=click.FloatRange(min=0))
@click.option("--decimals", type=click.IntRange(min=0), default=2, show_default=True)
@click.option(
    "--locale",
    default=lambda: get_settings().locale,
    show_default="HELPERKIT_LOCALE or en",
    help="Unit names: bytes (en) or octets (fr); other locales use bytes.",
)
def size(size: float, decimals: int, locale: str) -> None:  # pylint: disable=redefined-outer-name
    """Print SIZE bytes in a human-readable unit."""
    click.echo(files.format_size(size, decimals, locale))


@file.command()
@click.argument("name")
def mime(name: str) -> None:
    """Print the MIME type of NAME (a path, file name or extension).

    For an existing file, the content signature takes precedence over the
    extension.
    """
    path = Path(name)
    detected = None
    if path.is_file():
        with path.open("rb") as handle:
            detected = files.get_mime_type_from_bytes(handle.read(64))
    if detected is None and "." not in name:
        detected = files.get_mime_type_from_extension(name)
    click.echo(detected or files.get_mime_type_for_file(name))
