"""
Change User Role Use Case

Handles changing a user's role within its tenant.
"""

from typing import Optional

from account_management.app.use_cases.base import Command, CommandUseCase
from account_management.domain.entities import TenantId, UserId, UserRole
from shared_kernel.result import Error, Result, Return

from .common import get_tenant_user, require_owner, user_not_found


class ChangeUserRoleCommand(Command):
    tenant_id: TenantId
    id: UserId
    role: UserRole
    executing_user_id: UserId
    executing_user_role: UserRole


class ChangeUserRoleUseCase(CommandUseCase[ChangeUserRoleCommand, None]):
    """
    Use case for changing a user's role within its tenant.

    Business Rules:
    - Only owners can change roles
    - Nobody can change their own role
    - Target user must belong to the tenant
    """

    def authorize(self, command: ChangeUserRoleCommand) -> Optional[Error]:
        return require_owner(
            command.executing_user_role,
            "Only owners are allowed to change the user role of other users.",
        )

    async def handle(self, command: ChangeUserRoleCommand) -> Result[None]:
        if command.id == command.executing_user_id:
            return Return.err(
                Error("CANNOT_CHANGE_OWN_ROLE", "You cannot change your own user role.")
            )

        user = await get_tenant_user(self.uow, command.tenant_id, command.id)
        if user is None:
            return user_not_found(command.id)

        user.change_role(command.role)
        await self.uow.users.update(user)
        return Return.ok()
