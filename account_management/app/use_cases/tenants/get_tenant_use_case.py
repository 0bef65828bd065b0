"""
Use Case: Get Tenant
"""

from account_management.app.use_cases.base import Query, QueryUseCase
from account_management.domain.entities import TenantId
from shared_kernel.result import Result, Return

from .dtos import TenantResponse


class GetTenantQuery(Query):
    id: TenantId


class GetTenantUseCase(QueryUseCase[GetTenantQuery, TenantResponse]):
    async def handle(self, query: GetTenantQuery) -> Result[TenantResponse]:
        tenant = await self.uow.tenants.get_by_id(query.id)
        if tenant is None:
            return Return.not_found(f"Tenant with id '{query.id}' not found.")

        return Return.ok(TenantResponse.from_entity(tenant))
