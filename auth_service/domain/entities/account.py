"""
Account Entity

A username/password identity.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlalchemy import text
from sqlmodel import Column, DateTime, Field, Index, SQLModel

from auth_service.domain.base import utc_now


class Account(SQLModel, table=True):
    """
    Account entity - a registered username/password identity.

    Business Rules:
    - Username and email are unique among accounts that are not soft-deleted
    - Username is 6 to 16 characters long
    - Password stored as salted scrypt hash (hex of salt + derived key)
    - password_hash only changes on registration and reset confirmation
    - Accounts are soft-deleted (deleted_at), never removed
    """

    __tablename__ = "accounts"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    username: str = Field(max_length=16)
    email: str = Field(max_length=255)
    password_hash: str = Field(max_length=128)  # 32-byte salt + 32-byte key, hex

    # Timestamps
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
    deleted_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    __table_args__ = (
        Index(
            "uq_account_username_live",
            "username",
            unique=True,
            sqlite_where=text("deleted_at IS NULL"),
            postgresql_where=text("deleted_at IS NULL"),
        ),
        Index(
            "uq_account_email_live",
            "email",
            unique=True,
            sqlite_where=text("deleted_at IS NULL"),
            postgresql_where=text("deleted_at IS NULL"),
        ),
    )
