from abc import ABC, abstractmethod
from typing import Optional

from account_management.domain.entities import Tenant, TenantId


class ITenantRepository(ABC):
    """Tenant repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, tenant_id: TenantId) -> Optional[Tenant]:
        """Get tenant by ID"""
        pass

    @abstractmethod
    async def exists(self, tenant_id: TenantId) -> bool:
        """Check whether a tenant with this ID exists"""
        pass

    @abstractmethod
    async def add(self, tenant: Tenant) -> Tenant:
        """Stage a new tenant"""
        pass

    @abstractmethod
    async def update(self, tenant: Tenant) -> Tenant:
        """Stage changes to an existing tenant"""
        pass

    @abstractmethod
    async def remove(self, tenant: Tenant) -> None:
        """Stage removal of a tenant"""
        pass
