from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from auth_service.app.use_cases.sessions import ClientContext, VerifySessionUseCase
from auth_service.domain.entities import Session

T0 = datetime(2026, 1, 1, 0, 0, 0)
CLIENT = ClientContext(user_agent="Mozilla/5.0", ip="203.0.113.7")


class Clock:
    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now


def issued_session(issued_at: datetime = T0) -> Session:
    return Session(
        token="session-token",
        account_id=uuid4(),
        bound_user_agent="Mozilla/5.0",
        bound_ip="203.0.113.7",
        expires_at=issued_at + timedelta(hours=6),
        created_at=issued_at,
        updated_at=issued_at,
    )


@pytest.mark.asyncio
async def test_unknown_token(mock_uow):
    use_case = VerifySessionUseCase(mock_uow, clock=Clock(T0))

    result = await use_case.execute("missing", CLIENT)

    assert result.is_err()
    assert result.error.code == "INVALID_TOKEN"
    mock_uow.sessions.delete.assert_not_called()


@pytest.mark.asyncio
async def test_fresh_session_is_valid_without_write(mock_uow):
    mock_uow.sessions.get_by_token.return_value = issued_session()
    use_case = VerifySessionUseCase(mock_uow, clock=Clock(T0 + timedelta(hours=1)))

    result = await use_case.execute("session-token", CLIENT)

    assert result.is_ok()
    assert result.value.renewed is False
    assert result.value.expires_at is None
    mock_uow.sessions.update.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_sliding_renewal_in_back_half_of_lifetime(mock_uow):
    """Verify at T0+5h renews to T0+11h; verifying again right after does not renew"""
    session = issued_session()
    mock_uow.sessions.get_by_token.return_value = session
    clock = Clock(T0 + timedelta(hours=5))
    use_case = VerifySessionUseCase(mock_uow, clock=clock)

    renewed = await use_case.execute("session-token", CLIENT)

    assert renewed.is_ok()
    assert renewed.value.renewed is True
    assert renewed.value.expires_at == T0 + timedelta(hours=11)
    assert session.expires_at == T0 + timedelta(hours=11)
    mock_uow.sessions.update.assert_called_once_with(session)
    mock_uow.commit.assert_called_once()

    clock.now += timedelta(seconds=1)
    again = await use_case.execute("session-token", CLIENT)

    assert again.is_ok()
    assert again.value.renewed is False
    mock_uow.sessions.update.assert_called_once()


@pytest.mark.asyncio
async def test_exactly_three_hours_left_is_not_renewed(mock_uow):
    mock_uow.sessions.get_by_token.return_value = issued_session()
    use_case = VerifySessionUseCase(mock_uow, clock=Clock(T0 + timedelta(hours=3)))

    result = await use_case.execute("session-token", CLIENT)

    assert result.value.renewed is False


@pytest.mark.asyncio
async def test_expired_session_is_deleted(mock_uow):
    session = issued_session()
    mock_uow.sessions.get_by_token.return_value = session
    use_case = VerifySessionUseCase(mock_uow, clock=Clock(T0 + timedelta(hours=6)))

    result = await use_case.execute("session-token", CLIENT)

    assert result.is_err()
    assert result.error.code == "SESSION_EXPIRED"
    mock_uow.sessions.delete.assert_called_once_with(session)
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "client",
    [
        ClientContext(user_agent="curl/8.0", ip="203.0.113.7"),
        ClientContext(user_agent="Mozilla/5.0", ip="198.51.100.1"),
    ],
)
async def test_binding_mismatch_revokes_session(mock_uow, client):
    session = issued_session()
    mock_uow.sessions.get_by_token.return_value = session
    use_case = VerifySessionUseCase(mock_uow, clock=Clock(T0 + timedelta(hours=1)))

    result = await use_case.execute("session-token", client)

    assert result.is_err()
    assert result.error.code == "BINDING_MISMATCH"
    mock_uow.sessions.delete.assert_called_once_with(session)
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_binding_is_checked_before_expiry(mock_uow):
    mock_uow.sessions.get_by_token.return_value = issued_session()
    use_case = VerifySessionUseCase(mock_uow, clock=Clock(T0 + timedelta(hours=7)))

    result = await use_case.execute(
        "session-token", ClientContext(user_agent="curl/8.0", ip="203.0.113.7")
    )

    assert result.error.code == "BINDING_MISMATCH"
