"""Session use cases: login and session verification."""

from .login_use_case import LoginUseCase, SESSION_LIFETIME
from .verify_session_use_case import VerifySessionUseCase, RENEWAL_WINDOW
from .dtos import ClientContext, LoginResponse, VerifySessionResponse

__all__ = [
    "LoginUseCase",
    "VerifySessionUseCase",
    "SESSION_LIFETIME",
    "RENEWAL_WINDOW",
    "ClientContext",
    "LoginResponse",
    "VerifySessionResponse",
]
