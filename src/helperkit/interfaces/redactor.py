"""Masking of secrets in strings that are about to be logged.

Request URLs may carry the reCAPTCHA secret or a user's captcha token, and
command lines may carry ``--password`` options or ``TOKEN=...`` assignments.
Adapters pass such strings through a :class:`Redactor` first.
"""

import abc
from enum import Enum


class RedactorMode(Enum):
    """How much a redactor hides.

    ``LENIENT`` masks passwords, tokens and keys; ``STRICT`` also masks user
    names and user ids.
    """

    LENIENT = "lenient"
    STRICT = "strict"


class Redactor(abc.ABC):
    """Turns URLs and command lines into log-safe text."""

    _mode: RedactorMode

    @property
    def mode(self) -> RedactorMode:
        return self._mode

    @abc.abstractmethod
    def sanitize_url(self, raw_url: str) -> str:
        """Mask ``user:password@`` credentials and secret query parameters."""

    @abc.abstractmethod
    def sanitize_command(self, command: str) -> str:
        """Mask the values of secret options and ``NAME=value`` assignments."""
