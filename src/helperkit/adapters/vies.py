"""VIES (VAT Information Exchange System) registry client."""

from __future__ import annotations

import logging

import httpx

from helperkit.config import Settings, get_settings
from helperkit.domain.errors import VatRegistryError
from helperkit.interfaces.redactor import Redactor
from helperkit.interfaces.vat_registry import VatRegistry

from .http_client import build_client
from .redactor import Redactor as RegexRedactor

logger = logging.getLogger(__name__)


class ViesVatRegistry(VatRegistry):
    """Check VAT numbers against the European Commission's VIES REST API.

    Args:
        settings: Source of the endpoint URL and timeout.
        client: Preconfigured ``httpx.Client``; one is built from
            ``settings`` when omitted.
        redactor: Masks credentials in the endpoint URL before it is logged
            or put in an error message. Lenient by default.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        client: httpx.Client | None = None,
        redactor: Redactor | None = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._client = client or build_client(self._settings)
        self._redactor = redactor or RegexRedactor()

    def check_vat(self, country_code: str, number: str) -> bool:
        payload = {"countryCode": country_code, "vatNumber": number}
        logger.debug(
            "VIES lookup for %s%s at %s",
            country_code,
            number,
            self._redactor.sanitize_url(self._settings.vies_url),
        )
        try:
            response = self._client.post(self._settings.vies_url, json=payload)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPError as exc:
            raise VatRegistryError(f"VIES request failed: {self._redactor.sanitize_url(str(exc))}") from exc
        except ValueError as exc:
            raise VatRegistryError("VIES returned an invalid JSON response") from exc

        if not isinstance(data, dict):
            raise VatRegistryError(f"VIES returned an unexpected payload: {type(data).__name__}")

        valid = data.get("valid") is True
        logger.info("VIES reports %s%s as %s", country_code, number, "valid" if valid else "invalid")
        return valid
