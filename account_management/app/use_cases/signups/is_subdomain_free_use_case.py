"""
Use Case: Is Subdomain Free
"""

from account_management.app.use_cases.base import Query, QueryUseCase
from account_management.domain.entities import TenantId
from shared_kernel.result import Result, Return


class IsSubdomainFreeQuery(Query):
    subdomain: str


class IsSubdomainFreeUseCase(QueryUseCase[IsSubdomainFreeQuery, bool]):
    async def handle(self, query: IsSubdomainFreeQuery) -> Result[bool]:
        exists = await self.uow.tenants.exists(TenantId(query.subdomain))
        return Return.ok(not exists)
