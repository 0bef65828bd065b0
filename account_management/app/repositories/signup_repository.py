from abc import ABC, abstractmethod
from typing import Optional

from account_management.domain.entities import Signup, SignupId


class ISignupRepository(ABC):
    """Signup repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, signup_id: SignupId) -> Optional[Signup]:
        """Get signup by ID"""
        pass

    @abstractmethod
    async def add(self, signup: Signup) -> Signup:
        """Stage a new signup"""
        pass

    @abstractmethod
    async def update(self, signup: Signup) -> Signup:
        """Stage changes to an existing signup"""
        pass
