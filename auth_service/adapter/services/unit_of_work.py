import asyncio

from sqlmodel.ext.asyncio.session import AsyncSession

from auth_service.adapter.repositories.account_repository import AccountRepository
from auth_service.adapter.repositories.reset_record_repository import ResetRecordRepository
from auth_service.adapter.repositories.session_repository import SessionRepository
from auth_service.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.accounts = AccountRepository(self.session)
        self.sessions = SessionRepository(self.session)
        self.reset_records = ResetRecordRepository(self.session)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        # A cancelled request must not abandon a commit halfway
        commit_task = asyncio.ensure_future(self.session.commit())
        try:
            await asyncio.shield(commit_task)
        except asyncio.CancelledError:
            # The session must be idle before __aexit__ rolls it back
            await commit_task
            raise

    async def rollback(self):
        await self.session.rollback()
