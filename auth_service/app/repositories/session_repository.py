from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional
from uuid import UUID

from auth_service.domain.entities import Session


class ISessionRepository(ABC):
    """Session repository interface - application layer"""

    @abstractmethod
    async def get_by_token(self, token: str) -> Optional[Session]:
        """Get session by its token"""
        pass

    @abstractmethod
    async def create(self, session: Session) -> Session:
        """Create a new session"""
        pass

    @abstractmethod
    async def update(self, session: Session) -> Session:
        """Update existing session"""
        pass

    @abstractmethod
    async def delete(self, session: Session) -> None:
        """Delete a session"""
        pass

    @abstractmethod
    async def delete_all_by_account_id(self, account_id: UUID) -> int:
        """Delete all sessions of an account. Returns count of deleted sessions."""
        pass

    @abstractmethod
    async def delete_expired(self, now: datetime) -> int:
        """Delete sessions with expires_at <= now. Returns count."""
        pass
