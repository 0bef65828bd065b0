"""
Use Case: Delete User
"""

from typing import Optional

from account_management.app.use_cases.base import Command, CommandUseCase
from account_management.domain.entities import TenantId, UserId, UserRole
from shared_kernel.result import Error, Result, Return

from .common import get_tenant_user, require_owner, user_not_found


class DeleteUserCommand(Command):
    tenant_id: TenantId
    id: UserId
    executing_user_id: UserId
    executing_user_role: UserRole


class DeleteUserUseCase(CommandUseCase[DeleteUserCommand, None]):
    """
    Delete a user.

    Business Rules:
    - Only owners can delete users
    - Nobody can delete themselves
    """

    def authorize(self, command: DeleteUserCommand) -> Optional[Error]:
        return require_owner(
            command.executing_user_role, "Only owners are allowed to delete other users."
        )

    async def handle(self, command: DeleteUserCommand) -> Result[None]:
        if command.id == command.executing_user_id:
            return Return.err(Error("CANNOT_DELETE_SELF", "You cannot delete yourself."))

        user = await get_tenant_user(self.uow, command.tenant_id, command.id)
        if user is None:
            return user_not_found(command.id)

        await self.uow.users.remove(user)
        return Return.ok()
