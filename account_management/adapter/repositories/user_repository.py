from typing import List, Optional, Tuple

from sqlmodel import func, or_, select
from sqlmodel.ext.asyncio.session import AsyncSession

from account_management.adapter.mappers import apply_user, user_to_domain, user_to_row
from account_management.adapter.models import UserModel
from account_management.app.repositories.user_repository import IUserRepository
from account_management.domain.entities import TenantId, User, UserId, UserRole


def _like_pattern(search: str) -> str:
    escaped = search.lower().replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


class UserRepository(IUserRepository):
    """User repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, user_id: UserId) -> Optional[User]:
        """Get user by ID"""
        row = await self.session.get(UserModel, user_id.value)
        return user_to_domain(row) if row else None

    async def get_by_email(self, tenant_id: TenantId, email: str) -> Optional[User]:
        """Get user by email address within a tenant"""
        stmt = select(UserModel).where(
            UserModel.tenant_id == tenant_id.value,
            UserModel.email == email.lower(),
        )
        result = await self.session.exec(stmt)
        row = result.one_or_none()
        return user_to_domain(row) if row else None

    async def count_tenant_users(self, tenant_id: TenantId) -> int:
        """Count users belonging to a tenant"""
        stmt = (
            select(func.count())
            .select_from(UserModel)
            .where(UserModel.tenant_id == tenant_id.value)
        )
        result = await self.session.exec(stmt)
        return result.one()

    async def search(
        self,
        tenant_id: TenantId,
        search: Optional[str],
        role: Optional[UserRole],
        offset: int,
        limit: int,
    ) -> Tuple[List[User], int]:
        """Search users of a tenant, returns one page and the total match count"""
        conditions = [UserModel.tenant_id == tenant_id.value]
        if search:
            term = _like_pattern(search)
            conditions.append(
                or_(
                    func.lower(UserModel.email).like(term, escape="\\"),
                    func.lower(UserModel.first_name).like(term, escape="\\"),
                    func.lower(UserModel.last_name).like(term, escape="\\"),
                )
            )
        if role is not None:
            conditions.append(UserModel.role == role.value)

        count_stmt = select(func.count()).select_from(UserModel).where(*conditions)
        total = (await self.session.exec(count_stmt)).one()

        stmt = (
            select(UserModel)
            .where(*conditions)
            .order_by(UserModel.created_at, UserModel.email)
            .offset(offset)
            .limit(limit)
        )
        result = await self.session.exec(stmt)
        return [user_to_domain(row) for row in result.all()], total

    async def add(self, user: User) -> User:
        """Stage a new user"""
        self.session.add(user_to_row(user))
        await self.session.flush()
        return user

    async def update(self, user: User) -> User:
        """Stage changes to an existing user"""
        row = await self._load_row(user.id)
        apply_user(row, user)
        self.session.add(row)
        await self.session.flush()
        return user

    async def remove(self, user: User) -> None:
        """Stage removal; the delete is issued when the unit of work commits"""
        row = await self._load_row(user.id)
        await self.session.delete(row)

    async def _load_row(self, user_id: UserId) -> UserModel:
        row = await self.session.get(UserModel, user_id.value)
        if row is None:
            raise LookupError(f"User '{user_id}' is not persisted")
        return row
