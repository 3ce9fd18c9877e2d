"""Google reCAPTCHA v2 verification."""

from __future__ import annotations

import logging
from html import escape

import httpx

from helperkit.config import Settings, get_settings
from helperkit.interfaces.captcha import CaptchaVerifier
from helperkit.interfaces.redactor import Redactor

from .http_client import build_client
from .redactor import Redactor as RegexRedactor

logger = logging.getLogger(__name__)

VERIFY_URL = "https://www.google.com/recaptcha/api/siteverify"
API_JS_URL = "https://www.google.com/recaptcha/api.js"


class GoogleReCaptcha(CaptchaVerifier):
    """Server-side check of ``g-recaptcha-response`` tokens.

    The site key and secret default to ``HELPERKIT_RECAPTCHA_SITE_KEY`` and
    ``HELPERKIT_RECAPTCHA_SECRET``.
    """

    def __init__(
        self,
        site_key: str | None = None,
        secret: str | None = None,
        client: httpx.Client | None = None,
        settings: Settings | None = None,
        redactor: Redactor | None = None,
    ) -> None:
        settings = settings or get_settings()
        self.site_key = site_key if site_key is not None else settings.recaptcha_site_key
        self.secret = secret if secret is not None else settings.recaptcha_secret
        self._client = client or build_client(settings)
        self._redactor = redactor or RegexRedactor()

    def check(self, response: str) -> bool:
        if not self.secret:
            logger.error("reCAPTCHA secret is not configured")
            return False
        if not response:
            return False

        params = {"secret": self.secret, "response": response}
        url = httpx.URL(VERIFY_URL, params=params)
        logger.debug("reCAPTCHA verification: %s", self._redactor.sanitize_url(str(url)))
        try:
            result = self._client.get(url)
            result.raise_for_status()
            data = result.json()
        except httpx.HTTPError as exc:
            logger.error("reCAPTCHA verification request failed: %s", self._redactor.sanitize_url(str(exc)))
            return False
        except ValueError:
            logger.error("reCAPTCHA verification returned invalid JSON")
            return False

        if not isinstance(data, dict):
            logger.error("reCAPTCHA verification returned an unexpected payload: %s", type(data).__name__)
            return False
        if data.get("success") is not True:
            logger.info("reCAPTCHA rejected the response: %s", data.get("error-codes", []))
            return False
        return True

    def get_form_field(self) -> str:
        return f'<div class="g-recaptcha" data-sitekey="{escape(self.site_key or "")}"></div>'

    def get_javascript_url(self, locale: str = "en") -> str:
        return f"{API_JS_URL}?hl={locale}"
