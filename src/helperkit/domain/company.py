"""Company identifiers: names, French SIREN/SIRET, NAF/APE codes, Monaco NIS."""

from __future__ import annotations

import json
import re
from functools import lru_cache
from importlib.resources import files

_COMPANY_NAME = re.compile(r"^[0-9a-zA-Z'&àâäéèêëìîïòôöùûüçÀÂÄÉÈÊËÌÎÏÒÔÖÙÛÜÇ.()\s/-]{3,100}\Z")
_SIREN = re.compile(r"^[0-9]{9}\Z")
_SIRET = re.compile(r"^[0-9]{14}\Z")
_NAF = re.compile(r"^([0-9]{2})\.?([0-9]{2}[A-Za-z])\Z")
_MONACO_NIS = re.compile(r"^[0-9A-Z]{5,10}\Z")

NAF_CODES_RESOURCE = "france_naf_codes.json"


def check_company_name(name: str) -> bool:
    """Return True for 3..100 letters, digits, spaces and ``'&.()/-``."""
    return bool(_COMPANY_NAME.match(name))


def check_company_number(country_code: str, number: str) -> bool:
    """Check a registration number; only France has a known format."""
    if country_code == "FR":
        return check_france_siren(number)
    return True


def check_luhn(number: str | int) -> bool:
    """Validate a digit string with the Luhn (mod 10) checksum."""
    value = str(number)
    if not (value.isascii() and value.isdigit()):
        return False
    digits = [int(digit) for digit in value]
    # every second digit from the right is doubled; 2*d > 9 folds to 2*d - 9
    checksum = sum(digits[-1::-2]) + sum(sum(divmod(d * 2, 10)) for d in digits[-2::-2])
    return checksum % 10 == 0


# ============================================================================
#                           France
# ============================================================================


def check_france_siren(siren: str) -> bool:
    """A SIREN is 9 digits with a valid Luhn key."""
    return bool(_SIREN.match(siren)) and check_luhn(siren)


def check_france_siret(siret: str) -> bool:
    """A SIRET is a valid SIREN followed by 5 digits, Luhn-valid as a whole."""
    if not _SIRET.match(siret):
        return False
    return check_france_siren(siret[:9]) and check_luhn(siret)


@lru_cache(maxsize=1)
def get_france_naf_code_list() -> dict[str, str]:
    """Return the NAF rév. 2 sub-classes as ``{"62.01Z": label}``."""
    resource = files("helperkit") / "data" / NAF_CODES_RESOURCE
    return json.loads(resource.read_text(encoding="utf-8"))


def _normalize_naf(code: str) -> str | None:
    match = _NAF.match(code.strip())
    if not match:
        return None
    return f"{match.group(1)}.{match.group(2).upper()}"


def check_france_code_naf(code: str) -> bool:
    """Accept ``62.01Z`` or ``6201Z`` when the code exists in the nomenclature."""
    normalized = _normalize_naf(code)
    return normalized is not None and normalized in get_france_naf_code_list()


def check_france_code_ape(code: str) -> bool:
    return check_france_code_naf(code)


def get_france_ape_label(code: str) -> str:
    normalized = _normalize_naf(code)
    if normalized is None:
        return ""
    return get_france_naf_code_list().get(normalized, "")


def format_france_rcs(siret: str) -> str:
    """Format the RCS registration of a company: ``B 732 829 320 ``."""
    siren = siret[:-5]
    return "B " + "".join(f"{siren[i : i + 3]} " for i in range(0, len(siren), 3))


# ============================================================================
#                           Monaco
# ============================================================================


def check_monaco_nis(nis: str) -> bool:
    """Monaco NIS: 5 to 10 digits or upper-case letters."""
    return bool(_MONACO_NIS.match(nis))
