from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlalchemy import delete
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from auth_service.app.repositories.reset_record_repository import IResetRecordRepository
from auth_service.domain.entities import PasswordResetRecord


class ResetRecordRepository(IResetRecordRepository):
    """PasswordResetRecord repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, record: PasswordResetRecord) -> PasswordResetRecord:
        """Create a new password reset record"""
        self.session.add(record)
        await self.session.flush()
        await self.session.refresh(record)
        return record

    async def get_by_token_hash(self, token_hash: str) -> Optional[PasswordResetRecord]:
        """Get password reset record by token hash"""
        stmt = select(PasswordResetRecord).where(
            PasswordResetRecord.token_hash == token_hash
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def delete(self, record: PasswordResetRecord) -> None:
        """Delete a password reset record"""
        await self.session.delete(record)
        await self.session.flush()

    async def delete_by_account_id(self, account_id: UUID) -> int:
        """Delete every reset record of an account"""
        stmt = delete(PasswordResetRecord).where(
            PasswordResetRecord.account_id == account_id
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount

    async def delete_expired(self, now: datetime) -> int:
        """Delete reset records that expired at or before now"""
        stmt = delete(PasswordResetRecord).where(PasswordResetRecord.expires_at <= now)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
