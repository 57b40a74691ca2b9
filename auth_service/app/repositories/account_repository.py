from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from auth_service.domain.entities import Account


class IAccountRepository(ABC):
    """Account repository interface - application layer"""

    @abstractmethod
    async def get_by_username(self, username: str) -> Optional[Account]:
        """Get a live (not soft-deleted) account by username"""
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[Account]:
        """Get a live (not soft-deleted) account by email address"""
        pass

    @abstractmethod
    async def get_by_id(self, account_id: UUID) -> Optional[Account]:
        """Get a live account by ID"""
        pass

    @abstractmethod
    async def create(self, account: Account) -> Account:
        """
        Create a new account.

        Raises DuplicateAccountError when the username or email unique
        constraint rejects the insert.
        """
        pass

    @abstractmethod
    async def update(self, account: Account) -> Account:
        """Update existing account"""
        pass
