"""
Use Case: Start Login

Emails a one-time password to an existing user of a tenant.
"""

from datetime import timedelta
from typing import Optional

from config import ApplicationConfig
from account_management.app.services.email_client import EmailClient
from account_management.app.services.one_time_password import (
    generate_one_time_password,
    hash_one_time_password,
)
from account_management.app.services.unit_of_work import UnitOfWork
from account_management.app.use_cases.base import Command, CommandUseCase
from account_management.domain.entities import Login, TenantId
from shared_kernel.result import Result, Return
from shared_kernel.validation import Validator, is_email, max_length

from .dtos import StartLoginResponse


class StartLoginCommand(Command):
    tenant_id: TenantId
    email: str


class StartLoginValidator(Validator[StartLoginCommand]):
    def __init__(self):
        super().__init__()
        self.rule_for("email", is_email, "Email must be in a valid format.")
        self.rule_for("email", max_length(100), "Email must be no longer than 100 characters.")


class StartLoginUseCase(CommandUseCase[StartLoginCommand, StartLoginResponse]):
    """
    Start Login

    Business Logic:
    1. Find the user by email within the tenant, NotFound if absent
    2. Create a Login holding the bcrypt hash of a fresh one-time password
    3. Email the one-time password
    """

    def __init__(
        self,
        uow: UnitOfWork,
        email_client: EmailClient,
        valid_for: timedelta = timedelta(minutes=ApplicationConfig.LOGIN_VALID_MINUTES),
    ):
        super().__init__(uow)
        self.email_client = email_client
        self.valid_for = valid_for

    def create_validator(
        self, command: StartLoginCommand
    ) -> Optional[Validator[StartLoginCommand]]:
        return StartLoginValidator()

    async def handle(self, command: StartLoginCommand) -> Result[StartLoginResponse]:
        user = await self.uow.users.get_by_email(command.tenant_id, command.email)
        if user is None:
            return Return.not_found(
                f"No user with the email '{command.email}' exists on this tenant."
            )

        one_time_password = generate_one_time_password()
        login = Login.create(
            tenant_id=user.tenant_id,
            user_id=user.id,
            one_time_password_hash=hash_one_time_password(one_time_password),
            valid_for=self.valid_for,
        )
        await self.uow.logins.add(login)

        await self.email_client.send(
            user.email,
            "Your login code",
            f"Your login code is: {one_time_password}\n"
            f"The code is valid for {int(self.valid_for.total_seconds() // 60)} minutes.",
        )

        return Return.ok(
            StartLoginResponse(
                login_id=str(login.id),
                valid_for_seconds=int(self.valid_for.total_seconds()),
            )
        )
