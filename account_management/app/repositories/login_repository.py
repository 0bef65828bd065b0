from abc import ABC, abstractmethod
from typing import Optional

from account_management.domain.entities import Login, LoginId


class ILoginRepository(ABC):
    """Login repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, login_id: LoginId) -> Optional[Login]:
        pass

    @abstractmethod
    async def add(self, login: Login) -> Login:
        pass

    @abstractmethod
    async def update(self, login: Login) -> Login:
        pass
