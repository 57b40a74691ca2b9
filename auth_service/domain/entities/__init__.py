"""
Credential Service Domain Entities

Each entity lives in its own module.
"""

from .account import Account
from .session import Session
from .reset_record import PasswordResetRecord

__all__ = [
    "Account",
    "Session",
    "PasswordResetRecord",
]
