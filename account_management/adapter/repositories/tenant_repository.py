from typing import Optional

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from account_management.adapter.mappers import apply_tenant, tenant_to_domain, tenant_to_row
from account_management.adapter.models import TenantModel
from account_management.app.repositories.tenant_repository import ITenantRepository
from account_management.domain.entities import Tenant, TenantId


class TenantRepository(ITenantRepository):
    """Tenant repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, tenant_id: TenantId) -> Optional[Tenant]:
        """Get tenant by ID"""
        row = await self.session.get(TenantModel, tenant_id.value)
        return tenant_to_domain(row) if row else None

    async def exists(self, tenant_id: TenantId) -> bool:
        """Check whether a tenant with this ID exists"""
        stmt = select(TenantModel.id).where(TenantModel.id == tenant_id.value)
        result = await self.session.exec(stmt)
        return result.first() is not None

    async def add(self, tenant: Tenant) -> Tenant:
        """Stage a new tenant"""
        self.session.add(tenant_to_row(tenant))
        await self.session.flush()
        return tenant

    async def update(self, tenant: Tenant) -> Tenant:
        """Stage changes to an existing tenant"""
        row = await self._load_row(tenant.id)
        apply_tenant(row, tenant)
        self.session.add(row)
        await self.session.flush()
        return tenant

    async def remove(self, tenant: Tenant) -> None:
        """Stage removal; the delete is issued when the unit of work commits"""
        row = await self._load_row(tenant.id)
        await self.session.delete(row)

    async def _load_row(self, tenant_id: TenantId) -> TenantModel:
        row = await self.session.get(TenantModel, tenant_id.value)
        if row is None:
            raise LookupError(f"Tenant '{tenant_id}' is not persisted")
        return row
