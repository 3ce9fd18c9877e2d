"""Interface for captcha verifiers."""

import abc

# pylint: disable=too-few-public-methods


class CaptchaVerifier(abc.ABC):
    """Contract for a captcha verification service."""

    @abc.abstractmethod
    def check(self, response: str) -> bool:
        """Return True if the user's captcha response is accepted."""

    def __call__(self, response: str) -> bool:
        return self.check(response)
