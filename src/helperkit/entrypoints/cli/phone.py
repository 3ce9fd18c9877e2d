"""``helperkit phone`` - format and classify phone numbers."""

from __future__ import annotations

import click
import click_extra as clickx

from helperkit.config import get_settings
from helperkit.domain import phone_number

country_option = click.option(
    "--country",
    "-c",
    default=lambda: get_settings().default_country,
    show_default="HELPERKIT_DEFAULT_COUNTRY or FR",
    help="Region used for numbers written without an international prefix.",
)


def _require_valid(number: str, country: str) -> None:
    if not phone_number.is_valid(number, country):
        raise click.ClickException(f"Invalid phone number for {country}: {number}")


@click.group(cls=clickx.ExtraGroup)
def phone() -> None:
    """Work with phone numbers."""


@phone.command(name="format")
@click.argument("number")
@country_option
@click.option(
    "--international/--national",
    default=True,
    show_default=True,
    help="Output format.",
)
@click.option("--e164", is_flag=True, help="Print the E.164 form instead.")
def format_number(number: str, country: str, international: bool, e164: bool) -> None:
    """Print NUMBER formatted for humans (or as E.164)."""
    _require_valid(number, country)
    if e164:
        click.echo(phone_number.parse(number, country))
    elif international:
        click.echo(phone_number.format_international(number, country))
    else:
        click.echo(phone_number.format_national(number, country))


@phone.command(name="type")
@click.argument("number")
@country_option
def number_type(number: str, country: str) -> None:
    """Print the line type and region of NUMBER."""
    _require_valid(number, country)
    line_type = phone_number.get_type(number, country)
    click.echo(f"type: {line_type.name.lower() if line_type is not None else 'unknown'}")
    click.echo(f"country: {phone_number.get_country_iso_code(number, country)}")
