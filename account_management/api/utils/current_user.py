"""
Typed views of the authenticated caller

Converts the string claims of UserInfo into domain identifiers. A token whose
claims do not parse is treated as invalid.
"""

from fastapi import status

from account_management.api.error import ClientError
from account_management.domain.entities import TenantId, UserId, UserRole
from shared_kernel.result import Error
from shared_kernel.user_info import UserInfo


def _invalid_token(message: str) -> ClientError:
    return ClientError(
        Error("INVALID_TOKEN", message), status_code=status.HTTP_401_UNAUTHORIZED
    )


def tenant_of(user_info: UserInfo) -> TenantId:
    return TenantId(user_info.tenant_id)


def user_id_of(user_info: UserInfo) -> UserId:
    try:
        return UserId.parse(user_info.user_id)
    except (TypeError, ValueError):
        raise _invalid_token("Token carries a malformed user id")


def role_of(user_info: UserInfo) -> UserRole:
    try:
        return UserRole(user_info.user_role)
    except ValueError:
        raise _invalid_token("Token carries an unknown role")
