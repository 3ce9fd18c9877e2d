"""Form field constraints and the functions that apply them."""

from .constraints import (
    BusinessActivityCode,
    Captcha,
    City,
    CompanyName,
    CompanyRegistrationNumber,
    Constraint,
    Country,
    Email,
    FirstName,
    Gender,
    GoogleRecaptcha,
    LastName,
    PhoneNumber,
    Street,
    VatNumber,
    Violation,
    ZipCode,
)
from .validator import validate, validate_values

__all__ = [
    "BusinessActivityCode",
    "Captcha",
    "City",
    "CompanyName",
    "CompanyRegistrationNumber",
    "Constraint",
    "Country",
    "Email",
    "FirstName",
    "Gender",
    "GoogleRecaptcha",
    "LastName",
    "PhoneNumber",
    "Street",
    "VatNumber",
    "Violation",
    "ZipCode",
    "validate",
    "validate_values",
]
