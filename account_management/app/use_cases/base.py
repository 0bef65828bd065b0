"""
Command/Query pipeline

Every use case runs the same way:

1. Open the unit of work (one transaction per request)
2. Check the caller may run the command at all
3. Run the validator, if the use case has one; failures stop here
4. Call handle()
5. Commands commit when handle() succeeded; the unit of work rolls back
   on every other exit path, including exceptions
"""

import logging
from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict

from account_management.app.services.unit_of_work import UnitOfWork
from shared_kernel.result import Error, Result, Return
from shared_kernel.validation import Validator

logger = logging.getLogger(__name__)

C = TypeVar("C")
T = TypeVar("T")


class Command(BaseModel):
    """Immutable request to change state"""

    model_config = ConfigDict(frozen=True)


class Query(BaseModel):
    """Immutable request to read state"""

    model_config = ConfigDict(frozen=True)


class UseCase(ABC, Generic[C, T]):
    commits = False

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    def authorize(self, command: C) -> Optional[Error]:
        """Return an error when the caller is not allowed to run the command"""
        return None

    def create_validator(self, command: C) -> Optional[Validator[C]]:
        """Build the validator; called inside the unit of work so rules can use repositories"""
        return None

    @abstractmethod
    async def handle(self, command: C) -> Result[T]:
        pass

    async def execute(self, command: C) -> Result[T]:
        async with self.uow:
            denied = self.authorize(command)
            if denied is not None:
                logger.info(f"{type(command).__name__} denied: {denied.code}")
                return Return.err(denied)

            validator = self.create_validator(command)
            if validator is not None:
                failures = await validator.validate(command)
                if failures:
                    logger.info(
                        f"{type(command).__name__} rejected: "
                        + "; ".join(f"{f.field}: {f.message}" for f in failures)
                    )
                    return Return.validation_failure(failures)

            result = await self.handle(command)

            if result.is_err():
                logger.info(f"{type(command).__name__} failed: {result.error.code}")
            elif self.commits:
                await self.uow.commit()

            return result


class CommandUseCase(UseCase[C, T]):
    """Use case that changes state; commits on success"""

    commits = True


class QueryUseCase(UseCase[C, T]):
    """Read-only use case; never commits"""

    commits = False
