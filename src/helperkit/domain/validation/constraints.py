"""Constraints that can be attached to a form field.

Each constraint checks a single value and reports at most one
:class:`Violation`, whose ``message`` is a translation key such as
``email.invalid``. Empty values (``None`` and ``""``) pass every constraint
except :class:`Country`; pair them with a required-field check if needed.
"""

from __future__ import annotations

import abc
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, ClassVar

from helperkit.domain import company, phone_number, vat_number
from helperkit.domain.phone_number import PhoneNumberType
from helperkit.interfaces.captcha import CaptchaVerifier
from helperkit.interfaces.vat_registry import VatRegistry

from . import rules

# pylint: disable=too-few-public-methods


@dataclass(frozen=True)
class Violation:
    """A failed constraint."""

    message: str
    parameters: dict[str, Any] = field(default_factory=dict)
    value: Any = None
    property_path: str = ""


class Constraint(abc.ABC):
    """Base class for constraints; subclasses implement :meth:`is_valid`."""

    message: str
    skip_empty: ClassVar[bool] = True

    @abc.abstractmethod
    def is_valid(self, value: Any) -> bool:
        """Return True when ``value`` satisfies the constraint."""

    def validate(self, value: Any) -> list[Violation]:
        if self.skip_empty and (value is None or value == ""):
            return []
        if self.is_valid(value):
            return []
        return [Violation(self.message, {"value": value}, value)]


# ============================================================================
#                           Companies
# ============================================================================


@dataclass(frozen=True)
class BusinessActivityCode(Constraint):
    """NAF/APE code; only French codes are checked."""

    company_country: str = "FR"
    message: str = "business_activity_code.invalid"

    def is_valid(self, value: Any) -> bool:
        return self.company_country != "FR" or company.check_france_code_naf(str(value))


@dataclass(frozen=True)
class CompanyName(Constraint):
    message: str = "company_name.invalid"

    def is_valid(self, value: Any) -> bool:
        return company.check_company_name(str(value))


@dataclass(frozen=True)
class CompanyRegistrationNumber(Constraint):
    """SIRET for French companies; other countries are not checked."""

    company_country: str = "FR"
    message: str = "company_registration_number.invalid"

    def is_valid(self, value: Any) -> bool:
        return self.company_country != "FR" or company.check_france_siret(str(value))


@dataclass(frozen=True)
class VatNumber(Constraint):
    check_validity: bool = False
    registry: VatRegistry | None = None
    message: str = "vat_number.invalid"

    def is_valid(self, value: Any) -> bool:
        return vat_number.check(str(value), self.check_validity, self.registry)


# ============================================================================
#                           Captchas
# ============================================================================


@dataclass(frozen=True)
class Captcha(Constraint):
    """Delegates to any callable that accepts the user's captcha response."""

    verifier: Callable[[str], bool]
    message: str = "captcha.invalid"

    def is_valid(self, value: Any) -> bool:
        return self.verifier(str(value)) is not False


@dataclass(frozen=True)
class GoogleRecaptcha(Constraint):
    service: CaptchaVerifier
    message: str = "captcha.invalid"

    def is_valid(self, value: Any) -> bool:
        return self.service.check(str(value)) is not False


# ============================================================================
#                           People and addresses
# ============================================================================


@dataclass(frozen=True)
class Country(Constraint):
    """ISO 3166 country code; unlike the other constraints, empty fails."""

    message: str = "country.invalid"
    skip_empty: ClassVar[bool] = False

    def is_valid(self, value: Any) -> bool:
        return bool(value) and rules.check_country(str(value))


@dataclass(frozen=True)
class Email(Constraint):
    message: str = "email.invalid"

    def is_valid(self, value: Any) -> bool:
        return rules.check_email(str(value))


@dataclass(frozen=True)
class FirstName(Constraint):
    message: str = "first_name.invalid"

    def is_valid(self, value: Any) -> bool:
        return rules.check_first_name(str(value))


@dataclass(frozen=True)
class LastName(Constraint):
    message: str = "last_name.invalid"

    def is_valid(self, value: Any) -> bool:
        return rules.check_last_name(str(value))


@dataclass(frozen=True)
class Gender(Constraint):
    message: str = "gender.invalid"

    def is_valid(self, value: Any) -> bool:
        return rules.check_civility(value)


@dataclass(frozen=True)
class City(Constraint):
    message: str = "city.invalid"

    def is_valid(self, value: Any) -> bool:
        return rules.check_city(str(value))


@dataclass(frozen=True)
class Street(Constraint):
    message: str = "street.invalid"

    def is_valid(self, value: Any) -> bool:
        return rules.check_street(str(value))


@dataclass(frozen=True)
class ZipCode(Constraint):
    message: str = "post_code.invalid"

    def is_valid(self, value: Any) -> bool:
        return rules.check_zip_code(str(value))


@dataclass(frozen=True)
class PhoneNumber(Constraint):
    """Valid number, optionally of a given line type.

    A ``FIXED_LINE`` requirement also accepts VOIP numbers, which is what
    internet boxes hand out for landlines.
    """

    phone_number_type: PhoneNumberType | None = None
    default_country: str = phone_number.DEFAULT_COUNTRY
    message: str = "phone_number.invalid"

    def is_valid(self, value: Any) -> bool:
        number = str(value)
        if not phone_number.is_valid(number, self.default_country):
            return False
        if self.phone_number_type is None:
            return True
        actual = phone_number.get_type(number, self.default_country)
        if actual == self.phone_number_type:
            return True
        return self.phone_number_type == PhoneNumberType.FIXED_LINE and actual == PhoneNumberType.VOIP
