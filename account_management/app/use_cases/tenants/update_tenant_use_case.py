"""
Use Case: Update Tenant

Renames a tenant.
"""

from typing import Optional

from account_management.app.use_cases.base import Command, CommandUseCase
from account_management.domain.entities import TenantId
from shared_kernel.result import Result, Return
from shared_kernel.validation import Validator, length_between, not_empty


class UpdateTenantCommand(Command):
    id: TenantId
    name: str


class UpdateTenantValidator(Validator[UpdateTenantCommand]):
    def __init__(self):
        super().__init__()
        self.rule_for("name", not_empty, "Name must not be empty.")
        self.rule_for(
            "name", length_between(1, 30), "Name must be between 1 and 30 characters."
        )


class UpdateTenantUseCase(CommandUseCase[UpdateTenantCommand, None]):
    def create_validator(
        self, command: UpdateTenantCommand
    ) -> Optional[Validator[UpdateTenantCommand]]:
        return UpdateTenantValidator()

    async def handle(self, command: UpdateTenantCommand) -> Result[None]:
        tenant = await self.uow.tenants.get_by_id(command.id)
        if tenant is None:
            return Return.not_found(f"Tenant with id '{command.id}' not found.")

        tenant.update(command.name)
        await self.uow.tenants.update(tenant)
        return Return.ok()
