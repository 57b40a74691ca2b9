"""Password reset use cases."""

from .request_password_reset_use_case import (
    RequestPasswordResetUseCase,
    RESET_TOKEN_LIFETIME,
)
from .confirm_password_reset_use_case import ConfirmPasswordResetUseCase
from .dtos import (
    ConfirmPasswordResetCommand,
    ConfirmPasswordResetResponse,
    RequestPasswordResetResponse,
)
from .tokens import hash_reset_token

__all__ = [
    "RequestPasswordResetUseCase",
    "ConfirmPasswordResetUseCase",
    "RESET_TOKEN_LIFETIME",
    "ConfirmPasswordResetCommand",
    "ConfirmPasswordResetResponse",
    "RequestPasswordResetResponse",
    "hash_reset_token",
]
