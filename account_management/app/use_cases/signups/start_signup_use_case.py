"""
Use Case: Start Signup

Records a pending signup for the requested subdomain and
emails a one-time password that CompleteSignup exchanges for a tenant.
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
from account_management.domain.entities import Signup, TenantId
from shared_kernel.result import Result, Return
from shared_kernel.validation import Validator, is_email, matches, max_length

from .dtos import StartSignupResponse

SUBDOMAIN_PATTERN = r"[a-z0-9]{3,30}"


class StartSignupCommand(Command):
    subdomain: str
    email: str


class StartSignupValidator(Validator[StartSignupCommand]):
    def __init__(self, uow: UnitOfWork):
        super().__init__()
        self.uow = uow
        self.rule_for(
            "subdomain",
            matches(SUBDOMAIN_PATTERN),
            "Subdomain must be between 3-30 alphanumeric and lowercase characters.",
        )
        self.rule_for(
            "subdomain",
            self._is_subdomain_free,
            "The subdomain is not available.",
        )
        self.rule_for("email", is_email, "Email must be in a valid format.")
        self.rule_for("email", max_length(100), "Email must be no longer than 100 characters.")

    async def _is_subdomain_free(self, subdomain: str) -> bool:
        return not await self.uow.tenants.exists(TenantId(subdomain))


class StartSignupUseCase(CommandUseCase[StartSignupCommand, StartSignupResponse]):
    """
    Start Signup

    Business Logic:
    1. Validate subdomain format and availability, and the email
    2. Generate a one-time password and store only its bcrypt hash
    3. Create the Signup, valid for SIGNUP_VALID_MINUTES
    4. Email the one-time password
    """

    def __init__(
        self,
        uow: UnitOfWork,
        email_client: EmailClient,
        valid_for: timedelta = timedelta(minutes=ApplicationConfig.SIGNUP_VALID_MINUTES),
    ):
        super().__init__(uow)
        self.email_client = email_client
        self.valid_for = valid_for

    def create_validator(
        self, command: StartSignupCommand
    ) -> Optional[Validator[StartSignupCommand]]:
        return StartSignupValidator(self.uow)

    async def handle(self, command: StartSignupCommand) -> Result[StartSignupResponse]:
        one_time_password = generate_one_time_password()
        one_time_password_hash = hash_one_time_password(one_time_password)

        signup = Signup.create(
            tenant_id=TenantId(command.subdomain),
            email=command.email,
            one_time_password_hash=one_time_password_hash,
            valid_for=self.valid_for,
        )
        await self.uow.signups.add(signup)

        await self.email_client.send(
            signup.email,
            "Confirm your email address",
            f"Your confirmation code is: {one_time_password}\n"
            f"The code is valid for {int(self.valid_for.total_seconds() // 60)} minutes.",
        )

        return Return.ok(
            StartSignupResponse(
                signup_id=str(signup.id),
                valid_for_seconds=int(self.valid_for.total_seconds()),
            )
        )
