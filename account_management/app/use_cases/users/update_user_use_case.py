"""
Use Case: Update User

Updates the profile fields of a user.
"""

from typing import Optional

from account_management.app.use_cases.base import Command, CommandUseCase
from account_management.domain.entities import TenantId, UserId
from shared_kernel.result import Result, Return
from shared_kernel.validation import Validator, max_length

from .common import get_tenant_user, user_not_found


class UpdateUserCommand(Command):
    tenant_id: TenantId
    id: UserId
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    title: Optional[str] = None


class UpdateUserValidator(Validator[UpdateUserCommand]):
    def __init__(self):
        super().__init__()
        self.rule_for(
            "first_name", max_length(30), "First name must be no longer than 30 characters."
        )
        self.rule_for(
            "last_name", max_length(30), "Last name must be no longer than 30 characters."
        )
        self.rule_for("title", max_length(50), "Title must be no longer than 50 characters.")


class UpdateUserUseCase(CommandUseCase[UpdateUserCommand, None]):
    def create_validator(
        self, command: UpdateUserCommand
    ) -> Optional[Validator[UpdateUserCommand]]:
        return UpdateUserValidator()

    async def handle(self, command: UpdateUserCommand) -> Result[None]:
        user = await get_tenant_user(self.uow, command.tenant_id, command.id)
        if user is None:
            return user_not_found(command.id)

        user.update(command.first_name, command.last_name, command.title)
        await self.uow.users.update(user)
        return Return.ok()
