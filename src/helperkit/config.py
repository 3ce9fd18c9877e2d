"""Configuration utilities for helperkit.

Settings are read from ``HELPERKIT_*`` environment variables (or a local
``.env`` file) through pydantic-settings. ``get_settings`` caches the
resolved values for the lifetime of the process.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from platformdirs import user_data_dir
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_PREFIX = "HELPERKIT_"  # pragma: no mutate
VIES_REST_URL = (
    "https://ec.europa.eu/taxation_customs/vies/rest-api/check-vat-number"
)


class Settings(BaseSettings):
    """Process-wide helperkit settings."""

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    data_dir: Path = Field(
        default_factory=lambda: Path(user_data_dir("helperkit", appauthor=False)),
        description="Default directory for JsonDB files.",
    )
    http_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        description="Timeout for outgoing HTTP requests (seconds).",
    )
    command_timeout_seconds: float = Field(
        default=60.0,
        gt=0,
        description="Default timeout for shell commands (seconds).",
    )
    default_country: str = Field(
        default="FR",
        min_length=2,
        max_length=2,
        description="ISO 3166 country used to parse national phone numbers.",
    )
    locale: str = Field(
        default="en",
        min_length=2,
        description="Locale used for date names and file-size units.",
    )
    recaptcha_site_key: str | None = Field(
        default=None, description="Public reCAPTCHA site key."
    )
    recaptcha_secret: str | None = Field(
        default=None, description="Private reCAPTCHA secret."
    )
    vies_url: str = Field(
        default=VIES_REST_URL,
        min_length=8,
        description="VIES REST endpoint used for online VAT checks.",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the cached settings for this process."""
    return Settings()
