"""
Session Entity

Server-issued login sessions bound to a client context.
"""

from datetime import datetime
from uuid import UUID

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from auth_service.domain.base import utc_now


class Session(SQLModel, table=True):
    """
    Session entity - opaque session token bound to user agent and IP.

    Business Rules:
    - The token itself is the primary key
    - Valid only while now < expires_at and the request comes from the
      bound user agent and IP
    - Any user agent / IP drift deletes the session
    - Lifetime is 6 hours, extended to now + 6h when verified with less
      than 3 hours remaining
    """

    __tablename__ = "sessions"

    token: str = Field(primary_key=True, max_length=64)
    account_id: UUID = Field(foreign_key="accounts.id", nullable=False, index=True)

    bound_user_agent: str = Field(default="")
    bound_ip: str = Field(max_length=64)

    expires_at: datetime = Field(sa_column=Column(DateTime, nullable=False))

    # Timestamps
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_session_expires_at", "expires_at"),)
