"""
PasswordResetRecord Entity

Single-use, time-boxed authorisation to set a new password.
"""

from datetime import datetime
from uuid import UUID

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from auth_service.domain.base import utc_now


class PasswordResetRecord(SQLModel, table=True):
    """
    PasswordResetRecord entity - pending password reset.

    Business Rules:
    - Expires 1 hour after issuance
    - Token is stored as the SHA-256 hex digest of the issued token
    - At most one live record per account (issuing a new one deletes the rest)
    - Deleted when consumed or when found expired
    """

    __tablename__ = "password_reset_records"

    token_hash: str = Field(primary_key=True, max_length=64)  # SHA-256 output
    account_id: UUID = Field(foreign_key="accounts.id", nullable=False)

    expires_at: datetime = Field(sa_column=Column(DateTime, nullable=False))
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_password_reset_account_id", "account_id"),
        Index("idx_password_reset_expires_at", "expires_at"),
    )
