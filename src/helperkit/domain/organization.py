"""Organization data holder, modelled on the schema.org ``Organization`` type."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass
class Organization:  # pylint: disable=too-many-instance-attributes
    """A company, association or public body.

    Every field is optional. ``department`` points at a parent or child
    organization; ``isic_v4`` is the UN ISIC rev. 4 activity code and
    ``lei_code`` the 20-character Legal Entity Identifier.
    """

    identifier: int | str | None = None
    name: str | None = None
    legal_name: str | None = None
    description: str | None = None
    lei_code: str | None = None
    isic_v4: str | None = None
    department: Organization | None = None
    address: str | None = None
    phone_number: str | None = None
    url: str | None = None
    logo: str | None = None
    email: str | None = None
    number_of_employees: int | None = None
    vat_id: str | None = None
    legal_form: str | None = None
    capital: float | None = None
    registration_number: str | None = None
    registration_city: str | None = None
    registration_country: str | None = None
    founding_date: date | None = None
    dissolution_date: date | None = None

    def get_display_name(self) -> str | None:
        return self.name or self.legal_name
