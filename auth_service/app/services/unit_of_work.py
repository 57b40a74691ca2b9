from abc import ABC, abstractmethod

from auth_service.app.repositories.account_repository import IAccountRepository
from auth_service.app.repositories.reset_record_repository import IResetRecordRepository
from auth_service.app.repositories.session_repository import ISessionRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    accounts: IAccountRepository
    sessions: ISessionRepository
    reset_records: IResetRecordRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
