"""
Use Case: Delete Tenant

Removes a tenant once it no longer owns any users.
"""

from typing import Optional

from account_management.app.use_cases.base import Command, CommandUseCase
from account_management.domain.entities import TenantId
from shared_kernel.result import Result, Return
from shared_kernel.validation import Validator


class DeleteTenantCommand(Command):
    id: TenantId


class DeleteTenantValidator(Validator[DeleteTenantCommand]):
    def __init__(self, uow):
        super().__init__()
        self.uow = uow
        self.rule_for(
            "id",
            self._has_no_users,
            "All users must be deleted before the tenant can be deleted.",
        )

    async def _has_no_users(self, tenant_id: TenantId) -> bool:
        return await self.uow.users.count_tenant_users(tenant_id) == 0


class DeleteTenantUseCase(CommandUseCase[DeleteTenantCommand, None]):
    """
    Delete a tenant.

    Business Logic:
    1. Validate the tenant owns no users
    2. Load the tenant, NotFound if absent
    3. Stage the removal; the unit of work commits it
    """

    def create_validator(
        self, command: DeleteTenantCommand
    ) -> Optional[Validator[DeleteTenantCommand]]:
        return DeleteTenantValidator(self.uow)

    async def handle(self, command: DeleteTenantCommand) -> Result[None]:
        tenant = await self.uow.tenants.get_by_id(command.id)
        if tenant is None:
            return Return.not_found(f"Tenant with id '{command.id}' not found.")

        await self.uow.tenants.remove(tenant)
        return Return.ok()
