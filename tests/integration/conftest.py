import pytest_asyncio
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
from auth_service.depends import get_reset_notifier, get_unit_of_work
from auth_service.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from auth_service.app.services.rate_gate import RateGate
from auth_service.app.services.reset_notifier import IResetNotifier
import auth_service.domain.entities  # noqa: F401 - registers table metadata


class CapturingResetNotifier(IResetNotifier):
    """Keeps issued reset tokens so tests can play the email recipient"""

    def __init__(self):
        self.sent = []

    async def send_reset_token(self, email: str, username: str, token: str) -> None:
        self.sent.append({"email": email, "username": username, "token": token})

    @property
    def last_token(self) -> str:
        return self.sent[-1]["token"]


@pytest_asyncio.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(engine):
    return sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
def reset_notifier():
    return CapturingResetNotifier()


@pytest_asyncio.fixture
async def app(db_session, reset_notifier):
    from auth_service.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_reset_notifier] = lambda: reset_notifier

    # Tests fire requests back to back; throttling has its own tests
    app.state.rate_gate = RateGate(interval_seconds=0)

    return app


@pytest_asyncio.fixture
async def client(app):
    from httpx import ASGITransport
    from config import ApplicationConfig

    transport = ASGITransport(app=app)
    async with AsyncClient(
        transport=transport,
        base_url="http://test",
        headers={"X-API-Key": ApplicationConfig.API_KEY, "User-Agent": "pytest-browser/1.0"},
    ) as ac:
        yield ac
