from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from auth_service.adapter.services.jwt_identity_verifier import JwtIdentityTokenVerifier
from auth_service.adapter.services.log_reset_notifier import LogResetNotifier
from auth_service.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from auth_service.app.services.identity_verifier import IIdentityTokenVerifier
from auth_service.app.services.reset_notifier import IResetNotifier

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_reset_notifier() -> IResetNotifier:
    return LogResetNotifier()


def get_identity_verifier() -> IIdentityTokenVerifier:
    return JwtIdentityTokenVerifier(
        secret=ApplicationConfig.IDENTITY_TOKEN_SECRET,
        algorithm=ApplicationConfig.IDENTITY_TOKEN_ALGORITHM,
        audience=ApplicationConfig.IDENTITY_TOKEN_AUDIENCE,
        issuer=ApplicationConfig.IDENTITY_TOKEN_ISSUER,
    )


async def init_db():
    """Create any missing tables on the configured engine"""
    from sqlmodel import SQLModel
    import auth_service.domain.entities  # noqa: F401 - registers table metadata

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
