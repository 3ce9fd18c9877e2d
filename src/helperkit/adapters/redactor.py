"""Regex-based redactor for sanitizing secrets from strings.

Masks sensitive values found in URLs (``user:pass@`` credentials, secret
query parameters such as ``secret=`` for reCAPTCHA), HTTP Authorization
headers, shell command lines (``--password hunter2``, ``TOKEN=abc``) and
free-form ``key: value`` fragments. Strict mode also redacts usernames/ids.
"""

import re

from helperkit.interfaces import redactor
from helperkit.interfaces.redactor import RedactorMode

# pylint: disable=too-few-public-methods

PLACEHOLDER = "***"
SECRET_KEYWORDS = [
    "password",
    "passwd",
    "pwd",
    "secret",
    "token",
    "api_key",
    "apikey",
    "access_token",
    "refresh_token",
    "id_token",
    "authorization",
    "sig",
    "signature",
]
STRICT_MODE_ADDITIONAL_KEYWORDS = ["user", "username", "uid"]
STRICT_MODE_SECRET_KEYWORDS = SECRET_KEYWORDS + STRICT_MODE_ADDITIONAL_KEYWORDS
# only redacted as query parameters (reCAPTCHA tokens)
QUERY_ONLY_KEYWORDS = ["response"]


def _keywords_pattern(keywords: list[str]) -> str:
    return "|".join(kw.replace("_", "[-_]?") for kw in keywords)


SECRET_KEYWORDS_PATTERN = _keywords_pattern(SECRET_KEYWORDS)
STRICT_MODE_SECRET_KEYWORDS_PATTERN = _keywords_pattern(STRICT_MODE_SECRET_KEYWORDS)
QUERY_ONLY_KEYWORDS_PATTERN = _keywords_pattern(QUERY_ONLY_KEYWORDS)

QUERY_STRING_PATTERN = re.compile(
    rf"([?&](?:{SECRET_KEYWORDS_PATTERN}|{QUERY_ONLY_KEYWORDS_PATTERN})=)[^&#\s;'\"]*",
    re.IGNORECASE,
)
STRICT_MODE_QUERY_STRING_PATTERN = re.compile(
    rf"([?&](?:{STRICT_MODE_SECRET_KEYWORDS_PATTERN}|{QUERY_ONLY_KEYWORDS_PATTERN})=)"
    r"[^&#\s;'\"]*",
    re.IGNORECASE,
)
KEY_VALUE_SECRET_PATTERN = re.compile(
    rf"(\b(?:{SECRET_KEYWORDS_PATTERN})\s*:\s*)\S+", re.IGNORECASE
)
STRICT_MODE_KEY_VALUE_SECRET_PATTERN = re.compile(
    rf"(\b(?:{STRICT_MODE_SECRET_KEYWORDS_PATTERN})\s*:\s*)\S+", re.IGNORECASE
)
# NAME=value assignments and --name=value options on a command line
ASSIGNMENT_PATTERN = re.compile(
    rf"((?<![?&\w])(?:{SECRET_KEYWORDS_PATTERN})=)[^&#\s;'\"]+", re.IGNORECASE
)
STRICT_MODE_ASSIGNMENT_PATTERN = re.compile(
    rf"((?<![?&\w])(?:{STRICT_MODE_SECRET_KEYWORDS_PATTERN})=)[^&#\s;'\"]+",
    re.IGNORECASE,
)
# --name value options on a command line
OPTION_PATTERN = re.compile(
    rf"(--?(?:{SECRET_KEYWORDS_PATTERN})\s+)(\"[^\"]*\"|'[^']*'|\S+)", re.IGNORECASE
)
STRICT_MODE_OPTION_PATTERN = re.compile(
    rf"(--?(?:{STRICT_MODE_SECRET_KEYWORDS_PATTERN})\s+)(\"[^\"]*\"|'[^']*'|\S+)",
    re.IGNORECASE,
)
BEARER_PATTERN = re.compile(r"Bearer\s[0-9a-zA-Z\.\-_]*", re.IGNORECASE)
URL_PASSWORD_PATTERN = re.compile(r"(?<=://)([^:@/\s]+):([^@/\s]+)@")
URL_USER_PATTERN = re.compile(r"(?<=://)([^:@/\s]+)(?=:(?:\*\*\*|[^@/\s]*)@)")


class Redactor(redactor.Redactor):
    """Redactor implementation using regex-based sanitization."""

    def __init__(self, mode: RedactorMode = RedactorMode.LENIENT) -> None:
        self._mode = mode

    @property
    def _strict(self) -> bool:
        return self._mode == RedactorMode.STRICT

    def sanitize_url(self, raw_url: str) -> str:
        sanitized = self._sanitize_credentials(str(raw_url))

        query_pattern = (
            STRICT_MODE_QUERY_STRING_PATTERN if self._strict else QUERY_STRING_PATTERN
        )
        sanitized = query_pattern.sub(rf"\1{PLACEHOLDER}", sanitized)

        return self._sanitize_key_values(sanitized)

    def sanitize_command(self, command: str) -> str:
        sanitized = self._sanitize_credentials(str(command))

        query_pattern = (
            STRICT_MODE_QUERY_STRING_PATTERN if self._strict else QUERY_STRING_PATTERN
        )
        sanitized = query_pattern.sub(rf"\1{PLACEHOLDER}", sanitized)

        assignment_pattern = (
            STRICT_MODE_ASSIGNMENT_PATTERN if self._strict else ASSIGNMENT_PATTERN
        )
        sanitized = assignment_pattern.sub(rf"\1{PLACEHOLDER}", sanitized)

        option_pattern = STRICT_MODE_OPTION_PATTERN if self._strict else OPTION_PATTERN
        sanitized = option_pattern.sub(rf"\1{PLACEHOLDER}", sanitized)

        return self._sanitize_key_values(sanitized)

    # --- Internal Helpers ---

    def _sanitize_credentials(self, text: str) -> str:
        # user:pass@ -> user:***@
        sanitized = URL_PASSWORD_PATTERN.sub(
            r"\1:***@",  # pragma: no mutate
            text,
        )
        if self._strict:
            sanitized = URL_USER_PATTERN.sub(PLACEHOLDER, sanitized)
        return BEARER_PATTERN.sub(PLACEHOLDER, sanitized)

    def _sanitize_key_values(self, text: str) -> str:
        key_value_pattern = (
            STRICT_MODE_KEY_VALUE_SECRET_PATTERN
            if self._strict
            else KEY_VALUE_SECRET_PATTERN
        )
        return key_value_pattern.sub(rf"\1{PLACEHOLDER}", text)
