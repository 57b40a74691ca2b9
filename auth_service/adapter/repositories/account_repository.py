from typing import Optional
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from auth_service.app.repositories.account_repository import IAccountRepository
from auth_service.domain.entities import Account
from auth_service.domain.errors import DuplicateAccountError

# PostgreSQL names the violated index; SQLite names table.column and no values
UNIQUE_INDEX_FIELDS = {
    "uq_account_username_live": "username",
    "uq_account_email_live": "email",
}


def conflicting_field(message: str) -> str:
    """Which unique account field an IntegrityError message refers to"""
    lowered = message.lower()
    for index_name, field in UNIQUE_INDEX_FIELDS.items():
        if index_name in lowered:
            return field
    if "accounts.email" in lowered:
        return "email"
    return "username"


class AccountRepository(IAccountRepository):
    """Account repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_username(self, username: str) -> Optional[Account]:
        """Get a live account by username"""
        stmt = select(Account).where(
            Account.username == username, Account.deleted_at.is_(None)
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_email(self, email: str) -> Optional[Account]:
        """Get a live account by email address"""
        stmt = select(Account).where(Account.email == email, Account.deleted_at.is_(None))
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_id(self, account_id: UUID) -> Optional[Account]:
        """Get a live account by ID"""
        stmt = select(Account).where(Account.id == account_id, Account.deleted_at.is_(None))
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, account: Account) -> Account:
        """Create a new account, translating unique violations"""
        self.session.add(account)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            await self.session.rollback()
            field = conflicting_field(str(exc.orig))
            raise DuplicateAccountError(field) from exc
        await self.session.refresh(account)
        return account

    async def update(self, account: Account) -> Account:
        """Update existing account"""
        self.session.add(account)
        await self.session.flush()
        await self.session.refresh(account)
        return account
