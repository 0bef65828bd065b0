from typing import Optional

from sqlmodel.ext.asyncio.session import AsyncSession

from account_management.adapter.mappers import apply_login, login_to_domain, login_to_row
from account_management.adapter.models import LoginModel
from account_management.app.repositories.login_repository import ILoginRepository
from account_management.domain.entities import Login, LoginId


class LoginRepository(ILoginRepository):
    """Login repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, login_id: LoginId) -> Optional[Login]:
        row = await self.session.get(LoginModel, login_id.value)
        return login_to_domain(row) if row else None

    async def add(self, login: Login) -> Login:
        self.session.add(login_to_row(login))
        await self.session.flush()
        return login

    async def update(self, login: Login) -> Login:
        row = await self.session.get(LoginModel, login.id.value)
        if row is None:
            raise LookupError(f"Login '{login.id}' is not persisted")
        apply_login(row, login)
        self.session.add(row)
        await self.session.flush()
        return login
