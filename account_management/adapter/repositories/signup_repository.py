from typing import Optional

from sqlmodel.ext.asyncio.session import AsyncSession

from account_management.adapter.mappers import apply_signup, signup_to_domain, signup_to_row
from account_management.adapter.models import SignupModel
from account_management.app.repositories.signup_repository import ISignupRepository
from account_management.domain.entities import Signup, SignupId


class SignupRepository(ISignupRepository):
    """Signup repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, signup_id: SignupId) -> Optional[Signup]:
        """Get signup by ID"""
        row = await self.session.get(SignupModel, signup_id.value)
        return signup_to_domain(row) if row else None

    async def add(self, signup: Signup) -> Signup:
        """Stage a new signup"""
        self.session.add(signup_to_row(signup))
        await self.session.flush()
        return signup

    async def update(self, signup: Signup) -> Signup:
        """Stage changes to an existing signup"""
        row = await self.session.get(SignupModel, signup.id.value)
        if row is None:
            raise LookupError(f"Signup '{signup.id}' is not persisted")
        apply_signup(row, signup)
        self.session.add(row)
        await self.session.flush()
        return signup
