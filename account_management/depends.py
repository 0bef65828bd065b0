from typing import Optional

from fastapi import Depends, Header, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from account_management.adapter.services.email_client import LoggingEmailClient
from account_management.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from account_management.api.utils.jwt import verify_jwt
from account_management.app.services.email_client import EmailClient
from shared_kernel.user_info import UserInfo, parse_accept_language


def enable_sqlite_foreign_keys(engine: AsyncEngine) -> None:
    """SQLite only enforces foreign keys when asked to, per connection"""
    if engine.dialect.name != "sqlite":
        return

    @event.listens_for(engine.sync_engine, "connect")
    def _set_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


engine = create_async_engine(
    ApplicationConfig.DB_URI, echo=ApplicationConfig.DB_ECHO, future=True
)
enable_sqlite_foreign_keys(engine)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

security = HTTPBearer(auto_error=False)

email_client = LoggingEmailClient()


async def create_tables() -> None:
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_email_client() -> EmailClient:
    return email_client


async def get_user_info(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    accept_language: Optional[str] = Header(None),
) -> UserInfo:
    """
    Dependency resolving the caller's identity.

    Never fails: a missing or invalid token yields an unauthenticated UserInfo
    whose locale comes from the Accept-Language header.
    """
    claims = verify_jwt(credentials.credentials) if credentials else None
    return UserInfo.create(
        claims,
        parse_accept_language(accept_language),
        supported_locales=ApplicationConfig.SUPPORTED_LOCALES,
        default_locale=ApplicationConfig.DEFAULT_LOCALE,
    )


async def get_current_user(user_info: UserInfo = Depends(get_user_info)) -> UserInfo:
    """
    Dependency requiring an authenticated caller.

    Raises:
        HTTPException: 401 if the token is missing, invalid or expired
    """
    if not user_info.is_authenticated or not user_info.user_id or not user_info.tenant_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )

    return user_info
