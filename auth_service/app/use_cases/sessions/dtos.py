"""
Session Use Case DTOs (Data Transfer Objects)
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class ClientContext(BaseModel):
    """Client identity a session is bound to"""

    user_agent: str
    ip: str


class LoginResponse(BaseModel):
    """Response for login use case"""

    session_token: str
    expires_at: datetime


class VerifySessionResponse(BaseModel):
    """
    Response for session verification.

    ``renewed`` is True when the expiry was pushed forward; ``expires_at``
    then carries the new expiry, otherwise it is None.
    """

    renewed: bool
    expires_at: Optional[datetime] = None
