import pytest
from unittest.mock import AsyncMock, MagicMock

from auth_service.app.services.password_codec import PasswordCodec


@pytest.fixture
def mock_uow():
    """Mock UnitOfWork with all repositories"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.accounts = MagicMock()
    uow.accounts.get_by_username = AsyncMock(return_value=None)
    uow.accounts.get_by_email = AsyncMock(return_value=None)
    uow.accounts.get_by_id = AsyncMock(return_value=None)
    uow.accounts.create = AsyncMock(side_effect=lambda account: account)
    uow.accounts.update = AsyncMock(side_effect=lambda account: account)

    uow.sessions = MagicMock()
    uow.sessions.get_by_token = AsyncMock(return_value=None)
    uow.sessions.create = AsyncMock(side_effect=lambda session: session)
    uow.sessions.update = AsyncMock(side_effect=lambda session: session)
    uow.sessions.delete = AsyncMock()
    uow.sessions.delete_all_by_account_id = AsyncMock(return_value=0)
    uow.sessions.delete_expired = AsyncMock(return_value=0)

    uow.reset_records = MagicMock()
    uow.reset_records.get_by_token_hash = AsyncMock(return_value=None)
    uow.reset_records.create = AsyncMock(side_effect=lambda record: record)
    uow.reset_records.delete = AsyncMock()
    uow.reset_records.delete_by_account_id = AsyncMock(return_value=0)
    uow.reset_records.delete_expired = AsyncMock(return_value=0)

    return uow


@pytest.fixture
def fast_codec():
    """Codec with a cheap work factor so use case tests stay fast"""
    return PasswordCodec(n=1024)
