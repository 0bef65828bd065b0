"""
Use Case: Complete Login

Exchanges a valid one-time password for an access token.
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
from account_management.domain.entities import LoginId
from shared_kernel.result import Error, Result, Return
from shared_kernel.validation import Validator, length_between

from .dtos import CompleteLoginResponse

logger = logging.getLogger(__name__)


class CompleteLoginCommand(Command):
    login_id: LoginId
    one_time_password: str


class CompleteLoginValidator(Validator[CompleteLoginCommand]):
    def __init__(self):
        super().__init__()
        self.rule_for(
            "one_time_password",
            length_between(1, ONE_TIME_PASSWORD_LENGTH),
            f"The code must be between 1 and {ONE_TIME_PASSWORD_LENGTH} characters.",
        )


class CompleteLoginUseCase(CommandUseCase[CompleteLoginCommand, CompleteLoginResponse]):
    """
    Complete Login

    Errors:
        - NOT_FOUND: Login does not exist, or its user was deleted meanwhile
        - LOGIN_ALREADY_COMPLETED: Login was already used
        - TOO_MANY_ATTEMPTS: Attempt limit reached
        - LOGIN_EXPIRED: Validity window passed
        - INVALID_ONE_TIME_PASSWORD: Wrong code
    """

    def __init__(
        self, uow: UnitOfWork, max_attempts: int = ApplicationConfig.LOGIN_MAX_ATTEMPTS
    ):
        super().__init__(uow)
        self.max_attempts = max_attempts

    def create_validator(
        self, command: CompleteLoginCommand
    ) -> Optional[Validator[CompleteLoginCommand]]:
        return CompleteLoginValidator()

    async def handle(self, command: CompleteLoginCommand) -> Result[CompleteLoginResponse]:
        login = await self.uow.logins.get_by_id(command.login_id)
        if login is None:
            return Return.not_found(f"Login with id '{command.login_id}' not found.")

        if login.completed:
            return Return.err(
                Error("LOGIN_ALREADY_COMPLETED", "The login has already been completed.")
            )

        if login.retry_count >= self.max_attempts:
            return Return.err(
                Error("TOO_MANY_ATTEMPTS", "Too many attempts, please request a new code.")
            )

        if login.is_expired():
            return Return.err(
                Error("LOGIN_EXPIRED", "The code is no longer valid, please request a new code.")
            )

        if not verify_one_time_password(command.one_time_password, login.one_time_password_hash):
            login.register_invalid_attempt()
            await self.uow.logins.update(login)
            # The attempt counter must survive the failed command
            await self.uow.commit()
            logger.warning(
                f"Invalid one-time password for login {login.id} (attempt {login.retry_count})"
            )
            return Return.err(
                Error("INVALID_ONE_TIME_PASSWORD", "The code is wrong or no longer valid.")
            )

        user = await self.uow.users.get_by_id(login.user_id)
        if user is None or user.tenant_id != login.tenant_id:
            return Return.not_found(f"User with id '{login.user_id}' not found.")

        # Receiving the code proves the address
        if not user.email_confirmed:
            user.confirm_email()
            await self.uow.users.update(user)

        login.complete()
        await self.uow.logins.update(login)

        return Return.ok(
            CompleteLoginResponse(
                tenant_id=user.tenant_id.value,
                user_id=str(user.id),
                access_token=create_access_token(user),
            )
        )
