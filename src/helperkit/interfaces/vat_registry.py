"""Interface for online VAT number registries (e.g. VIES)."""

import abc

# pylint: disable=too-few-public-methods


class VatRegistry(abc.ABC):
    """Contract for a service that knows whether a VAT number is registered."""

    @abc.abstractmethod
    def check_vat(self, country_code: str, number: str) -> bool:
        """Return True if the registry reports the VAT number as valid.

        Args:
            country_code: Two-letter country prefix (e.g. ``"DE"``).
            number: The VAT number without its country prefix.

        Raises:
            VatRegistryError: If the registry cannot be queried.
        """
