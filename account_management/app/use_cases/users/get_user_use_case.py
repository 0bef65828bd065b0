"""
Use Case: Get User
"""

from account_management.app.use_cases.base import Query, QueryUseCase
from account_management.domain.entities import TenantId, UserId
from shared_kernel.result import Result, Return

from .common import get_tenant_user, user_not_found
from .dtos import UserResponse


class GetUserQuery(Query):
    tenant_id: TenantId
    id: UserId


class GetUserUseCase(QueryUseCase[GetUserQuery, UserResponse]):
    async def handle(self, query: GetUserQuery) -> Result[UserResponse]:
        user = await get_tenant_user(self.uow, query.tenant_id, query.id)
        if user is None:
            return user_not_found(query.id)

        return Return.ok(UserResponse.from_entity(user))
