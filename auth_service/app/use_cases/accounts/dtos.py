"""
Account Use Case DTOs (Data Transfer Objects)

Command/Response pattern:
- RegisterCommand: Input to use case (business intent, no HTTP concerns)
- RegisterResponse: Output from use case
"""

from pydantic import BaseModel


class RegisterCommand(BaseModel):
    """Registration command - fields as submitted by the client"""

    username: str
    email: str
    password: str
    confirm_password: str


class RegisterResponse(BaseModel):
    """Registration response - no session is issued on registration"""

    account_id: str
    username: str
