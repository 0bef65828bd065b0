from sqlmodel.ext.asyncio.session import AsyncSession

from account_management.adapter.repositories.login_repository import LoginRepository
from account_management.adapter.repositories.signup_repository import SignupRepository
from account_management.adapter.repositories.tenant_repository import TenantRepository
from account_management.adapter.repositories.user_repository import UserRepository
from account_management.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.tenants = TenantRepository(self.session)
        self.users = UserRepository(self.session)
        self.signups = SignupRepository(self.session)
        self.logins = LoginRepository(self.session)
        return self

    async def __aexit__(self, *args):
        # No-op after a commit; discards staged changes on every other exit path
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
