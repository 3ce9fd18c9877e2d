"""Phone number parsing and formatting on top of ``phonenumbers``.

Numbers without an international prefix are read in ``default_country``
(France unless told otherwise). Formatting helpers hand the input back
untouched when it cannot be parsed, so they are safe on user input.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import IntEnum

import phonenumbers
from phonenumbers import NumberParseException, PhoneNumberFormat

DEFAULT_COUNTRY = "FR"

# Overseas departments and territories reached through a French trunk
FRENCH_OVERSEAS_CALLING_CODES = ("262", "508", "590", "596", "594", "687", "689", "681")


class PhoneNumberType(IntEnum):
    """Line types reported by ``phonenumbers.number_type``."""

    FIXED_LINE = phonenumbers.PhoneNumberType.FIXED_LINE
    MOBILE = phonenumbers.PhoneNumberType.MOBILE
    FIXED_LINE_OR_MOBILE = phonenumbers.PhoneNumberType.FIXED_LINE_OR_MOBILE
    TOLL_FREE = phonenumbers.PhoneNumberType.TOLL_FREE
    PREMIUM_RATE = phonenumbers.PhoneNumberType.PREMIUM_RATE
    SHARED_COST = phonenumbers.PhoneNumberType.SHARED_COST
    VOIP = phonenumbers.PhoneNumberType.VOIP
    PERSONAL_NUMBER = phonenumbers.PhoneNumberType.PERSONAL_NUMBER
    PAGER = phonenumbers.PhoneNumberType.PAGER
    UAN = phonenumbers.PhoneNumberType.UAN
    VOICEMAIL = phonenumbers.PhoneNumberType.VOICEMAIL
    UNKNOWN = phonenumbers.PhoneNumberType.UNKNOWN


def _parse(number: str | None, default_country: str) -> phonenumbers.PhoneNumber | None:
    if not number:
        return None
    try:
        return phonenumbers.parse(number, default_country)
    except NumberParseException:
        return None


# ============================================================================
#                           Formatting
# ============================================================================


def format(  # pylint: disable=redefined-builtin
    number: str | None,
    number_format: int,
    default_country: str = DEFAULT_COUNTRY,
) -> str | None:
    """Format ``number`` with a ``phonenumbers.PhoneNumberFormat`` value."""
    parsed = _parse(number, default_country)
    if parsed is None:
        return number
    return phonenumbers.format_number(parsed, number_format)


def format_national(number: str | None, default_country: str = DEFAULT_COUNTRY) -> str | None:
    """``"+33123456789"`` becomes ``"01 23 45 67 89"``."""
    return format(number, PhoneNumberFormat.NATIONAL, default_country)


def format_international(
    number: str | None, default_country: str = DEFAULT_COUNTRY
) -> str | None:
    """``"0123456789"`` becomes ``"+33 1 23 45 67 89"``."""
    return format(number, PhoneNumberFormat.INTERNATIONAL, default_country)


def parse(number: str | None, default_country: str = DEFAULT_COUNTRY) -> str | None:
    """Return the E.164 form of ``number``, or the input when unparseable."""
    return format(number, PhoneNumberFormat.E164, default_country)


def parse_list(numbers: Iterable[str | None], default_country: str = DEFAULT_COUNTRY) -> list[str]:
    """Parse every non-empty number to E.164, dropping the empty ones."""
    return [parse(number, default_country) for number in numbers if number]


# ============================================================================
#                           Checks
# ============================================================================


def is_valid(number: str | None, default_country: str = DEFAULT_COUNTRY) -> bool:
    parsed = _parse(number, default_country)
    return parsed is not None and phonenumbers.is_valid_number(parsed)


def is_possible(number: str | None, default_country: str = DEFAULT_COUNTRY) -> bool:
    # same rule as is_valid
    return is_valid(number, default_country)


def get_type(number: str | None, default_country: str = DEFAULT_COUNTRY) -> PhoneNumberType | None:
    parsed = _parse(number, default_country)
    if parsed is None:
        return None
    return PhoneNumberType(phonenumbers.number_type(parsed))


def is_mobile(number: str | None, default_country: str = DEFAULT_COUNTRY) -> bool:
    return get_type(number, default_country) == PhoneNumberType.MOBILE


def is_fixed_line(number: str | None, default_country: str = DEFAULT_COUNTRY) -> bool:
    return get_type(number, default_country) == PhoneNumberType.FIXED_LINE


def is_premium(number: str | None, default_country: str = DEFAULT_COUNTRY) -> bool:
    return get_type(number, default_country) == PhoneNumberType.PREMIUM_RATE


def get_country_iso_code(
    number: str | None, default_country: str = DEFAULT_COUNTRY
) -> str | None:
    """Return the ISO 3166 region of ``number`` (``"GB"`` for UK numbers)."""
    parsed = _parse(number, default_country)
    if parsed is None:
        return None
    return phonenumbers.region_code_for_number(parsed)


# ============================================================================
#                           IVR conversions
# ============================================================================


def format_from_ivr(number: str | None) -> str | None:
    """Turn a caller id received from a telephony server into a dialable number.

    The server drops the leading zeros: 9 digits are a French national number
    without trunk prefix, longer numbers are international without ``00``.
    French overseas numbers come in as ``0590590...`` and become ``+590590...``.
    """
    if number is None or number.startswith("+33"):
        return number

    if not number.startswith("0"):
        if len(number) > 9:
            return "00" + number
        if len(number) == 9:
            return "0" + number

    for calling_code in FRENCH_OVERSEAS_CALLING_CODES:
        if number.startswith("0" + calling_code * 2) and len(number) == 13:
            number = "+" + number[1:]
    return number


def format_for_ivr(number: str | None, with_trunk_code: bool = True) -> str | None:
    """Turn a stored number into what a telephony server can dial.

    ``+`` becomes ``00``; French numbers lose ``0033`` and get their ``0``
    trunk prefix back unless ``with_trunk_code`` is False.
    """
    if number is None:
        return None
    if number.startswith("+"):
        number = "00" + number[1:]
    if number.startswith("0033"):
        number = number[4:]
        if with_trunk_code and len(number) > 5:
            number = "0" + number
    return number
