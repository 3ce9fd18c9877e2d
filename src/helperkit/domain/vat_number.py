"""Intra-community VAT numbers.

French numbers (``FR`` + 2-digit key + SIREN, or key + Monaco number) are
checked offline against their key. Other countries only get a syntax check,
plus an optional lookup in a :class:`~helperkit.interfaces.vat_registry.VatRegistry`
such as the VIES adapter.
"""

from __future__ import annotations

import logging
import re

from helperkit.domain.company import check_company_number
from helperkit.domain.errors import VatRegistryError
from helperkit.interfaces.vat_registry import VatRegistry

logger = logging.getLogger(__name__)

_COUNTRY = re.compile(r"^[A-Z]{2}\Z")
_NUMBER = re.compile(r"^[0-9A-Za-z+*.]{2,12}\Z")
_SEPARATORS = re.compile(r"[\s.\-]")


def format(vat_number: str) -> str:  # pylint: disable=redefined-builtin
    """Strip spaces, dots and dashes and upper-case the number."""
    return _SEPARATORS.sub("", vat_number).upper()


def france_vat_key(siren: int) -> int:
    """Return the 2-digit key that prefixes a French VAT number."""
    return ((siren % 97) * 3 + 12) % 97


def _check_france(number: str) -> bool:
    if len(number) == 11:
        siren = number[2:]
        if not check_company_number("FR", siren):
            return False
    elif len(number) == 9:
        # Monaco
        siren = number[2:]
    else:
        return False

    key = number[:2]
    if not (key.isdigit() and siren.isdigit()):
        return False
    return int(key) == france_vat_key(int(siren))


def check(
    vat_number: str,
    check_validity: bool = True,
    registry: VatRegistry | None = None,
) -> bool:
    """Check a VAT number such as ``FR44732829320``.

    Args:
        vat_number: Country code followed by the national number, no spaces.
        check_validity: Look non-French numbers up in ``registry``.
        registry: Online registry used when ``check_validity`` is set. Without
            one, non-French numbers are only checked syntactically.

    Returns:
        bool: False for malformed numbers, a wrong French key, or a registry
        that rejects the number or cannot be reached.
    """
    if not vat_number:
        return False

    country_code, number = vat_number[:2], vat_number[2:]
    if not _COUNTRY.match(country_code) or not _NUMBER.match(number):
        return False

    if country_code == "FR":
        return _check_france(number)

    if not check_validity or registry is None:
        return True

    try:
        return registry.check_vat(country_code, number)
    except VatRegistryError as exc:
        logger.warning("VAT registry lookup failed for %s: %s", country_code, exc)
        return False
