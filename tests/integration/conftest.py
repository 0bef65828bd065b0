import re
from typing import List, Optional, Tuple

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from account_management.adapter.mappers import tenant_to_row, user_to_row
from account_management.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from account_management.api.app import create_app
from account_management.app.services.email_client import EmailClient
from account_management.depends import (
    enable_sqlite_foreign_keys,
    get_email_client,
    get_unit_of_work,
)
from account_management.domain.entities import Tenant, TenantId, User, UserRole
from tests.fixtures.json_loader import TestDataLoader


class CapturingEmailClient(EmailClient):
    """Keeps outgoing emails in memory"""

    def __init__(self):
        self.sent: List[Tuple[str, str, str]] = []

    async def send(self, recipient: str, subject: str, body: str) -> None:
        self.sent.append((recipient, subject, body))

    def last_one_time_password(self) -> Optional[str]:
        if not self.sent:
            return None
        match = re.search(r"code is: ([A-Z0-9]{6})", self.sent[-1][2])
        return match.group(1) if match else None


@pytest_asyncio.fixture
def test_data():
    return TestDataLoader()


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite:///./test.db")
    enable_sqlite_foreign_keys(engine)
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with Session() as session:
        yield session


@pytest_asyncio.fixture
def email_client():
    return CapturingEmailClient()


@pytest_asyncio.fixture
async def client(db_session, email_client):
    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_email_client] = lambda: email_client

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
def seed(db_session):
    """Insert tenants and users straight into the database"""

    async def _seed(
        tenant_id: str = "acme",
        users: Tuple[Tuple[str, UserRole], ...] = (),
    ) -> Tuple[Tenant, List[User]]:
        tenant = Tenant.create(tenant_id)
        db_session.add(tenant_to_row(tenant))
        created = []
        for email, role in users:
            user = User.create(TenantId(tenant_id), email, role, email_confirmed=True)
            db_session.add(user_to_row(user))
            created.append(user)
        await db_session.commit()
        return tenant, created

    return _seed
