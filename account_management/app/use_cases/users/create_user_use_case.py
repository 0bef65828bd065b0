"""
Use Case: Create User

Adds a user to the caller's tenant.
"""

from typing import Optional

from account_management.app.services.unit_of_work import UnitOfWork
from account_management.app.use_cases.base import Command, CommandUseCase
from account_management.domain.entities import TenantId, User, UserRole
from shared_kernel.result import Error, Result, Return
from shared_kernel.validation import Validator, is_email, max_length

from .common import require_owner
from .dtos import CreateUserResponse


class CreateUserCommand(Command):
    tenant_id: TenantId
    email: str
    role: UserRole = UserRole.member
    email_confirmed: bool = False
    executing_user_role: UserRole


class CreateUserValidator(Validator[CreateUserCommand]):
    def __init__(self, uow: UnitOfWork, tenant_id: TenantId):
        super().__init__()
        self.uow = uow
        self.tenant_id = tenant_id
        self.rule_for("email", is_email, "Email must be in a valid format.")
        self.rule_for("email", max_length(100), "Email must be no longer than 100 characters.")
        self.rule_for(
            "email",
            self._is_email_free,
            lambda email: f"The email '{email}' is already in use by another user on this tenant.",
        )

    async def _is_email_free(self, email: str) -> bool:
        return await self.uow.users.get_by_email(self.tenant_id, email) is None


class CreateUserUseCase(CommandUseCase[CreateUserCommand, CreateUserResponse]):
    """
    Create User

    Business Rules:
    - Only owners can create users
    - Email must be valid and unused within the tenant
    """

    def authorize(self, command: CreateUserCommand) -> Optional[Error]:
        return require_owner(
            command.executing_user_role, "Only owners are allowed to create other users."
        )

    def create_validator(
        self, command: CreateUserCommand
    ) -> Optional[Validator[CreateUserCommand]]:
        return CreateUserValidator(self.uow, command.tenant_id)

    async def handle(self, command: CreateUserCommand) -> Result[CreateUserResponse]:
        tenant = await self.uow.tenants.get_by_id(command.tenant_id)
        if tenant is None:
            return Return.not_found(f"Tenant with id '{command.tenant_id}' not found.")

        user = User.create(
            tenant_id=command.tenant_id,
            email=command.email,
            role=command.role,
            email_confirmed=command.email_confirmed,
        )
        await self.uow.users.add(user)

        return Return.ok(CreateUserResponse(id=str(user.id)))
