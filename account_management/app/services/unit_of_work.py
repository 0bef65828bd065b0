from abc import ABC, abstractmethod

from account_management.app.repositories.login_repository import ILoginRepository
from account_management.app.repositories.signup_repository import ISignupRepository
from account_management.app.repositories.tenant_repository import ITenantRepository
from account_management.app.repositories.user_repository import IUserRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    tenants: ITenantRepository
    users: IUserRepository
    signups: ISignupRepository
    logins: ILoginRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
