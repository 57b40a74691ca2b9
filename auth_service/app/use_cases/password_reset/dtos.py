"""
Password Reset Use Case DTOs (Data Transfer Objects)
"""

from datetime import datetime

from pydantic import BaseModel


class RequestPasswordResetResponse(BaseModel):
    """Response for request password reset use case"""

    expires_at: datetime


class ConfirmPasswordResetCommand(BaseModel):
    """Reset confirmation as submitted by the client"""

    token: str
    password: str
    confirm_password: str


class ConfirmPasswordResetResponse(BaseModel):
    """Response for confirm password reset use case"""

    sessions_revoked: int
