"""
Avatar Use Cases

Set or clear the avatar embedded in a user. Each change bumps the avatar
version so clients can bust cached images.
"""

from typing import Optional

from account_management.app.use_cases.base import Command, CommandUseCase
from account_management.domain.entities import TenantId, UserId
from shared_kernel.result import Result, Return
from shared_kernel.validation import Validator, matches, max_length

from .common import get_tenant_user, user_not_found


class UpdateAvatarCommand(Command):
    tenant_id: TenantId
    id: UserId
    url: str


class UpdateAvatarValidator(Validator[UpdateAvatarCommand]):
    def __init__(self):
        super().__init__()
        self.rule_for("url", matches(r"https?://\S+"), "Avatar URL must be an http(s) URL.")
        self.rule_for("url", max_length(2048), "Avatar URL must be no longer than 2048 characters.")


class UpdateAvatarUseCase(CommandUseCase[UpdateAvatarCommand, None]):
    def create_validator(
        self, command: UpdateAvatarCommand
    ) -> Optional[Validator[UpdateAvatarCommand]]:
        return UpdateAvatarValidator()

    async def handle(self, command: UpdateAvatarCommand) -> Result[None]:
        user = await get_tenant_user(self.uow, command.tenant_id, command.id)
        if user is None:
            return user_not_found(command.id)

        user.update_avatar(command.url)
        await self.uow.users.update(user)
        return Return.ok()


class RemoveAvatarCommand(Command):
    tenant_id: TenantId
    id: UserId


class RemoveAvatarUseCase(CommandUseCase[RemoveAvatarCommand, None]):
    async def handle(self, command: RemoveAvatarCommand) -> Result[None]:
        user = await get_tenant_user(self.uow, command.tenant_id, command.id)
        if user is None:
            return user_not_found(command.id)

        user.remove_avatar()
        await self.uow.users.update(user)
        return Return.ok()
