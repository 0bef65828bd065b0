"""
Use Case: Complete Signup

Exchanges a valid one-time password for a new tenant and its owner.
"""

import logging
from typing import Optional

from config import ApplicationConfig
from account_management.api.utils.jwt import create_access_token
from account_management.app.services.one_time_password import (
    ONE_TIME_PASSWORD_LENGTH,
    verify_one_time_password,
)
from account_management.app.services.unit_of_work import UnitOfWork
from account_management.app.use_cases.base import Command, CommandUseCase
from account_management.domain.entities import SignupId, Tenant, User, UserRole
from shared_kernel.result import Error, Result, Return
from shared_kernel.validation import Validator, length_between

from .dtos import CompleteSignupResponse

logger = logging.getLogger(__name__)


class CompleteSignupCommand(Command):
    signup_id: SignupId
    one_time_password: str


class CompleteSignupValidator(Validator[CompleteSignupCommand]):
    def __init__(self):
        super().__init__()
        self.rule_for(
            "one_time_password",
            length_between(1, ONE_TIME_PASSWORD_LENGTH),
            f"The code must be between 1 and {ONE_TIME_PASSWORD_LENGTH} characters.",
        )


class CompleteSignupUseCase(CommandUseCase[CompleteSignupCommand, CompleteSignupResponse]):
    """
    Complete Signup

    Business Logic:
    1. Load the signup, NotFound if absent
    2. Reject completed, locked and expired signups
    3. Verify the one-time password; a wrong code counts as an attempt
    4. Create the tenant (trial) and its owner user (email confirmed)
    5. Mark the signup completed and issue an access token

    Errors:
        - NOT_FOUND: Signup does not exist
        - SIGNUP_ALREADY_COMPLETED: Signup was already used
        - TOO_MANY_ATTEMPTS: Attempt limit reached
        - SIGNUP_EXPIRED: Validity window passed
        - INVALID_ONE_TIME_PASSWORD: Wrong code
        - SUBDOMAIN_TAKEN: Another signup claimed the subdomain first
    """

    def __init__(
        self, uow: UnitOfWork, max_attempts: int = ApplicationConfig.SIGNUP_MAX_ATTEMPTS
    ):
        super().__init__(uow)
        self.max_attempts = max_attempts

    def create_validator(
        self, command: CompleteSignupCommand
    ) -> Optional[Validator[CompleteSignupCommand]]:
        return CompleteSignupValidator()

    async def handle(self, command: CompleteSignupCommand) -> Result[CompleteSignupResponse]:
        signup = await self.uow.signups.get_by_id(command.signup_id)
        if signup is None:
            return Return.not_found(f"Signup with id '{command.signup_id}' not found.")

        if signup.completed:
            return Return.err(
                Error("SIGNUP_ALREADY_COMPLETED", "The signup has already been completed.")
            )

        if signup.retry_count >= self.max_attempts:
            return Return.err(
                Error("TOO_MANY_ATTEMPTS", "Too many attempts, please request a new code.")
            )

        if signup.is_expired():
            return Return.err(
                Error("SIGNUP_EXPIRED", "The code is no longer valid, please request a new code.")
            )

        if not verify_one_time_password(
            command.one_time_password, signup.one_time_password_hash
        ):
            signup.register_invalid_attempt()
            await self.uow.signups.update(signup)
            # The attempt counter must survive the failed command
            await self.uow.commit()
            logger.warning(
                f"Invalid one-time password for signup {signup.id} "
                f"(attempt {signup.retry_count})"
            )
            return Return.err(
                Error("INVALID_ONE_TIME_PASSWORD", "The code is wrong or no longer valid.")
            )

        if await self.uow.tenants.exists(signup.tenant_id):
            return Return.err(
                Error("SUBDOMAIN_TAKEN", "The subdomain is not available.")
            )

        tenant = Tenant.create(signup.tenant_id.value)
        await self.uow.tenants.add(tenant)

        owner = User.create(
            tenant_id=tenant.id,
            email=signup.email,
            role=UserRole.owner,
            email_confirmed=True,
        )
        await self.uow.users.add(owner)

        signup.complete()
        await self.uow.signups.update(signup)

        access_token = create_access_token(owner)

        return Return.ok(
            CompleteSignupResponse(
                tenant_id=tenant.id.value,
                user_id=str(owner.id),
                access_token=access_token,
            )
        )
