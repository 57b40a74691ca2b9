from datetime import datetime, timedelta

import pytest
from httpx import AsyncClient
from sqlmodel import select

from auth_service.domain.base import utc_now
from auth_service.domain.entities import Session
from tests.integration.helpers import register_and_login


async def set_expiry(db_session, token: str, expires_at):
    result = await db_session.exec(select(Session).where(Session.token == token))
    session = result.one()
    session.expires_at = expires_at
    db_session.add(session)
    await db_session.commit()


async def session_exists(db_session, token: str) -> bool:
    db_session.expire_all()
    result = await db_session.exec(select(Session).where(Session.token == token))
    return result.one_or_none() is not None


@pytest.mark.asyncio
async def test_fresh_session_is_valid(client: AsyncClient):
    token = await register_and_login(client)

    response = await client.post("/auth/session", json={"token": token})

    assert response.status_code == 200
    assert response.json() == {"success": True}


@pytest.mark.asyncio
async def test_session_renewed_in_back_half(client: AsyncClient, db_session):
    """One hour left: expiry moves to now + 6h, then no renewal right after"""
    token = await register_and_login(client)
    await set_expiry(db_session, token, utc_now() + timedelta(hours=1))

    response = await client.post("/auth/session", json={"token": token})

    assert response.status_code == 201
    data = response.json()
    assert data["success"] is True
    new_expiry = datetime.fromisoformat(data["expirationTime"]).replace(tzinfo=None)
    remaining = new_expiry - utc_now()
    assert timedelta(hours=5, minutes=59) < remaining <= timedelta(hours=6)

    again = await client.post("/auth/session", json={"token": token})

    assert again.status_code == 200
    assert again.json() == {"success": True}


@pytest.mark.asyncio
async def test_expired_session_is_deleted(client: AsyncClient, db_session):
    token = await register_and_login(client)
    await set_expiry(db_session, token, utc_now() - timedelta(seconds=1))

    response = await client.post("/auth/session", json={"token": token})

    assert response.status_code == 400
    assert response.json()["code"] == "SESSION_EXPIRED"
    assert not await session_exists(db_session, token)

    response = await client.post("/auth/session", json={"token": token})

    assert response.status_code == 400
    assert response.json()["code"] == "INVALID_TOKEN"


@pytest.mark.asyncio
async def test_user_agent_change_revokes_session(client: AsyncClient, db_session):
    """A different user agent deletes the session; the original client is locked out too"""
    token = await register_and_login(client)

    response = await client.post(
        "/auth/session", json={"token": token}, headers={"User-Agent": "curl/8.0"}
    )

    assert response.status_code == 409
    data = response.json()
    assert data["code"] == "BINDING_MISMATCH"
    assert data["message"] == "Conflicting User agent/IP"
    assert not await session_exists(db_session, token)

    response = await client.post("/auth/session", json={"token": token})

    assert response.status_code == 400
    assert response.json()["code"] == "INVALID_TOKEN"


@pytest.mark.asyncio
async def test_ip_change_revokes_session(app, client: AsyncClient):
    from httpx import ASGITransport

    token = await register_and_login(client)

    transport = ASGITransport(app=app, client=("198.51.100.1", 4321))
    async with AsyncClient(
        transport=transport, base_url="http://test", headers=client.headers
    ) as other_client:
        response = await other_client.post("/auth/session", json={"token": token})

    assert response.status_code == 409
    assert response.json()["code"] == "BINDING_MISMATCH"


@pytest.mark.asyncio
async def test_unknown_token(client: AsyncClient):
    response = await client.post("/auth/session", json={"token": "does-not-exist"})

    assert response.status_code == 400
    data = response.json()
    assert data["success"] is False
    assert data["code"] == "INVALID_TOKEN"
