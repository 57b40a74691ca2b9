"""
Credential policy rules.

Username length and password strength checks applied on registration and
on password reset confirmation.
"""

import re

USERNAME_MIN_LENGTH = 6
USERNAME_MAX_LENGTH = 16
PASSWORD_MIN_LENGTH = 8

SPECIAL_CHARACTERS = r'~!@#$%^&*()-_+={}[]|\;:"<>,./?'

_UPPER = re.compile(r"[A-Z]")
_LOWER = re.compile(r"[a-z]")
_SPECIAL = re.compile("[" + re.escape(SPECIAL_CHARACTERS) + "]")


def is_valid_username(username: str) -> bool:
    return USERNAME_MIN_LENGTH <= len(username) <= USERNAME_MAX_LENGTH


def is_strong_password(password: str) -> bool:
    """
    A password is strong when it has at least 8 characters and contains an
    uppercase ASCII letter, a lowercase ASCII letter and one character from
    ``SPECIAL_CHARACTERS``.
    """
    if len(password) < PASSWORD_MIN_LENGTH:
        return False

    return bool(
        _UPPER.search(password)
        and _LOWER.search(password)
        and _SPECIAL.search(password)
    )
