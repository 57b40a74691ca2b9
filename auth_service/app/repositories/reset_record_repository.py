from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional
from uuid import UUID

from auth_service.domain.entities import PasswordResetRecord


class IResetRecordRepository(ABC):
    """PasswordResetRecord repository interface - application layer"""

    @abstractmethod
    async def create(self, record: PasswordResetRecord) -> PasswordResetRecord:
        """Create a new password reset record"""
        pass

    @abstractmethod
    async def get_by_token_hash(self, token_hash: str) -> Optional[PasswordResetRecord]:
        """Get password reset record by token hash"""
        pass

    @abstractmethod
    async def delete(self, record: PasswordResetRecord) -> None:
        """Delete a password reset record"""
        pass

    @abstractmethod
    async def delete_by_account_id(self, account_id: UUID) -> int:
        """Delete every reset record of an account. Returns count."""
        pass

    @abstractmethod
    async def delete_expired(self, now: datetime) -> int:
        """Delete reset records with expires_at <= now. Returns count."""
        pass
