"""``helperkit check`` - validate identifiers from the command line.

Each subcommand prints ``<value>: valid`` or ``<value>: invalid`` on stdout
and exits with status 0 or 1 accordingly, so it can be used in scripts::

    $ helperkit check siret 73282932000074 && echo ok
"""

from __future__ import annotations

import logging

import click
import click_extra as clickx

from helperkit.adapters.vies import ViesVatRegistry
from helperkit.domain import company, vat_number
from helperkit.domain.validation import rules
from helperkit.interfaces.redactor import Redactor

from .helpers import invalid, valid, warn

logger = logging.getLogger(__name__)


def _report(ctx: click.Context, subject: str, is_valid: bool) -> None:
    if is_valid:
        valid(subject)
        return
    invalid(subject)
    ctx.exit(1)


@click.group(cls=clickx.ExtraGroup)
def check() -> None:
    """Validate company identifiers, VAT numbers and e-mail addresses."""


@check.command()
@click.argument("siren")
@click.pass_context
def siren(ctx: click.Context, siren: str) -> None:  # pylint: disable=redefined-outer-name
    """Check a French SIREN (9 digits, Luhn checksum)."""
    _report(ctx, siren, company.check_france_siren(siren))


@check.command()
@click.argument("siret")
@click.pass_context
def siret(ctx: click.Context, siret: str) -> None:  # pylint: disable=redefined-outer-name
    """Check a French SIRET (14 digits, Luhn checksum)."""
    _report(ctx, siret, company.check_france_siret(siret))


@check.command()
@click.argument("code")
@click.option("--label/--no-label", default=False, help="Print the activity label of a valid code.")
@click.pass_context
def naf(ctx: click.Context, code: str, label: bool) -> None:
    """Check a French NAF/APE activity code such as 62.01Z."""
    is_valid = company.check_france_code_naf(code)
    _report(ctx, code, is_valid)
    if label:
        click.echo(company.get_france_ape_label(code))


@check.command()
@click.argument("number")
@click.option(
    "--online/--offline",
    default=False,
    show_default=True,
    help="Look non-French numbers up in the VIES registry.",
)
@click.pass_context
def vat(ctx: click.Context, number: str, online: bool) -> None:
    """Check an intra-community VAT number such as FR44732829320."""
    formatted = vat_number.format(number)
    registry = ViesVatRegistry(redactor=ctx.find_object(Redactor)) if online else None
    if online and formatted[:2] == "FR":
        warn("French numbers are checked locally; VIES is not queried.")
    _report(ctx, formatted, vat_number.check(formatted, check_validity=online, registry=registry))


@check.command(name="company-name")
@click.argument("name")
@click.pass_context
def company_name(ctx: click.Context, name: str) -> None:
    """Check that NAME is usable as a company name."""
    _report(ctx, name, company.check_company_name(name))


@check.command()
@click.argument("address")
@click.pass_context
def email(ctx: click.Context, address: str) -> None:
    """Check the syntax of an e-mail address (no DNS lookup)."""
    _report(ctx, address, rules.check_email(address))
