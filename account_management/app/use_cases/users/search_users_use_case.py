"""
Use Case: Search Users

Pages through the users of a tenant, optionally filtered by a search term
(email, first or last name) and role.
"""

import math
from typing import Optional

from account_management.app.use_cases.base import Query, QueryUseCase
from account_management.domain.entities import TenantId, UserRole
from shared_kernel.result import Result, Return
from shared_kernel.validation import Validator, between, max_length

from .dtos import SearchUsersResponse, UserResponse

MAX_PAGE_SIZE = 100
MAX_PAGE_OFFSET = 100_000


class SearchUsersQuery(Query):
    tenant_id: TenantId
    search: Optional[str] = None
    role: Optional[UserRole] = None
    page_offset: int = 0
    page_size: int = 25


class SearchUsersValidator(Validator[SearchUsersQuery]):
    def __init__(self):
        super().__init__()
        self.rule_for(
            "search", max_length(100), "Search must be no longer than 100 characters."
        )
        self.rule_for(
            "page_offset",
            between(0, MAX_PAGE_OFFSET),
            f"Page offset must be between 0 and {MAX_PAGE_OFFSET}.",
        )
        self.rule_for(
            "page_size",
            between(1, MAX_PAGE_SIZE),
            f"Page size must be between 1 and {MAX_PAGE_SIZE}.",
        )


class SearchUsersUseCase(QueryUseCase[SearchUsersQuery, SearchUsersResponse]):
    def create_validator(
        self, command: SearchUsersQuery
    ) -> Optional[Validator[SearchUsersQuery]]:
        return SearchUsersValidator()

    async def handle(self, query: SearchUsersQuery) -> Result[SearchUsersResponse]:
        users, total = await self.uow.users.search(
            query.tenant_id,
            query.search,
            query.role,
            offset=query.page_offset * query.page_size,
            limit=query.page_size,
        )

        return Return.ok(
            SearchUsersResponse(
                total_count=total,
                total_pages=math.ceil(total / query.page_size),
                current_page_offset=query.page_offset,
                users=[UserResponse.from_entity(user) for user in users],
            )
        )
