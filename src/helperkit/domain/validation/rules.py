"""Field-level checks for people, postal addresses and contact details."""

import re

import pytz
from email_validator import EmailNotValidError, validate_email

_ACCENTED = "àâäéèêëìîïòôöùûüçÀÂÄÉÈÊËÌÎÏÒÔÖÙÛÜÇ"
_FIRST_NAME = re.compile(rf"^[a-zA-Z'{_ACCENTED}\s-]{{3,120}}\Z")
_FIRST_NAME_WITH_DIGITS = re.compile(rf"^[0-9a-zA-Z'{_ACCENTED}\s-]{{3,120}}\Z")
_LAST_NAME = re.compile(rf"^[a-zA-Z'{_ACCENTED}\s-]{{2,120}}\Z")
_LAST_NAME_WITH_DIGITS = re.compile(rf"^[0-9a-zA-Z'{_ACCENTED}\s-]{{2,120}}\Z")
_CIVILITY = re.compile(r"^[0-2]\Z")
_STREET = re.compile(r"(([0-9]+ )?[a-zA-Z ]){1,200}\Z")
_CITY = re.compile(rf"^[a-zA-Z'{_ACCENTED}\s-]+\Z")
_ZIP_CODE = re.compile(r"^[\s0-9a-zA-Z]{3,15}\Z")


def check_first_name(value: str, numbers_allowed: bool = False) -> bool:
    pattern = _FIRST_NAME_WITH_DIGITS if numbers_allowed else _FIRST_NAME
    return bool(pattern.match(value))


def check_last_name(value: str, numbers_allowed: bool = False) -> bool:
    pattern = _LAST_NAME_WITH_DIGITS if numbers_allowed else _LAST_NAME
    return bool(pattern.match(value))


def check_civility(value: str | int) -> bool:
    """``0`` unknown, ``1`` male, ``2`` female."""
    return bool(_CIVILITY.match(str(value)))


def check_street(value: str) -> bool:
    return bool(_STREET.search(value))


def check_city(value: str) -> bool:
    return bool(_CITY.match(value))


def check_zip_code(value: str) -> bool:
    return bool(_ZIP_CODE.match(value))


def check_email(value: str) -> bool:
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def check_country(value: str) -> bool:
    """ISO 3166 alpha-2 code; ``UK`` is accepted alongside ``GB``."""
    return value == "UK" or value in pytz.country_names
