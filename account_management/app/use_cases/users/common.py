"""
Helpers shared by the user use cases
"""

from typing import Optional

from account_management.app.services.unit_of_work import UnitOfWork
from account_management.domain.entities import TenantId, User, UserId, UserRole
from shared_kernel.result import Error, Result, Return


async def get_tenant_user(
    uow: UnitOfWork, tenant_id: TenantId, user_id: UserId
) -> Optional[User]:
    """Load a user, treating users of other tenants as absent"""
    user = await uow.users.get_by_id(user_id)
    if user is None or user.tenant_id != tenant_id:
        return None
    return user


def user_not_found(user_id: UserId) -> Result:
    return Return.not_found(f"User with id '{user_id}' not found.")


def require_owner(role: UserRole, message: str) -> Optional[Error]:
    if role != UserRole.owner:
        return Error("INSUFFICIENT_ROLE", message)
    return None
