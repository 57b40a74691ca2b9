"""Account use cases."""

from .register_use_case import RegisterUseCase
from .dtos import RegisterCommand, RegisterResponse

__all__ = [
    "RegisterUseCase",
    "RegisterCommand",
    "RegisterResponse",
]
