"""Password strength estimation."""

import re
from enum import IntEnum

WEAK_PASSWORDS = frozenset({"password", "azerty", "123456", "qwerty", "admin", "test", "welcome"})
MIN_LENGTH = 8
LONG_PASSWORD_LENGTH = 12
LONG_PASSWORD_MIN_SCORE = 4

_CHARACTER_CLASSES = (
    re.compile(r"[A-Z]"),
    re.compile(r"[a-z]"),
    re.compile(r"[0-9]"),
    re.compile(r"[^A-Za-z0-9]"),
)


class PasswordStrength(IntEnum):
    VERY_WEAK = 0
    WEAK = 1
    MEDIUM = 2
    STRONG = 3
    VERY_STRONG = 4


def score(password: str) -> int:
    """One point for the minimum length and for each character class used.

    A long password earns one more point when it already scores 4.
    """
    points = int(len(password) >= MIN_LENGTH)
    points += sum(1 for pattern in _CHARACTER_CLASSES if pattern.search(password))
    if len(password) >= LONG_PASSWORD_LENGTH and points >= LONG_PASSWORD_MIN_SCORE:
        points += 1
    return points


def estimate(password: str | None) -> PasswordStrength:
    """Rate ``password``; common passwords are always very weak."""
    if not password or password.lower() in WEAK_PASSWORDS:
        return PasswordStrength.VERY_WEAK

    points = score(password)
    if points >= 6:
        return PasswordStrength.VERY_STRONG
    if points >= 5:
        return PasswordStrength.STRONG
    if points >= 4:
        return PasswordStrength.MEDIUM
    if points >= 2:
        return PasswordStrength.WEAK
    return PasswordStrength.VERY_WEAK
