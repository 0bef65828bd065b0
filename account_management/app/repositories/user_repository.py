from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from account_management.domain.entities import TenantId, User, UserId, UserRole


class IUserRepository(ABC):
    """User repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, user_id: UserId) -> Optional[User]:
        """Get user by ID"""
        pass

    @abstractmethod
    async def get_by_email(self, tenant_id: TenantId, email: str) -> Optional[User]:
        """Get user by email address within a tenant"""
        pass

    @abstractmethod
    async def count_tenant_users(self, tenant_id: TenantId) -> int:
        """Count users belonging to a tenant"""
        pass

    @abstractmethod
    async def search(
        self,
        tenant_id: TenantId,
        search: Optional[str],
        role: Optional[UserRole],
        offset: int,
        limit: int,
    ) -> Tuple[List[User], int]:
        """Search users of a tenant, returns one page and the total match count"""
        pass

    @abstractmethod
    async def add(self, user: User) -> User:
        """Stage a new user"""
        pass

    @abstractmethod
    async def update(self, user: User) -> User:
        """Stage changes to an existing user"""
        pass

    @abstractmethod
    async def remove(self, user: User) -> None:
        """Stage removal of a user"""
        pass
