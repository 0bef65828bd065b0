from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status
from pydantic import BaseModel, EmailStr, Field

from account_management.api.error import ClientError, raise_for_error
from account_management.api.utils.current_user import role_of, tenant_of, user_id_of
from account_management.app.services.unit_of_work import UnitOfWork
from account_management.app.use_cases.users import (
    MAX_PAGE_OFFSET,
    ChangeUserRoleCommand,
    ChangeUserRoleUseCase,
    CreateUserCommand,
    CreateUserResponse,
    CreateUserUseCase,
    DeleteUserCommand,
    DeleteUserUseCase,
    GetUserQuery,
    GetUserUseCase,
    RemoveAvatarCommand,
    RemoveAvatarUseCase,
    SearchUsersQuery,
    SearchUsersResponse,
    SearchUsersUseCase,
    UpdateAvatarCommand,
    UpdateAvatarUseCase,
    UpdateUserCommand,
    UpdateUserUseCase,
    UserResponse,
)
from account_management.depends import get_current_user, get_unit_of_work
from account_management.domain.entities import UserId, UserRole
from shared_kernel.result import Error
from shared_kernel.user_info import UserInfo

router = APIRouter(prefix="/users", tags=["User"])

ROLE_ERRORS = {
    "INSUFFICIENT_ROLE": status.HTTP_403_FORBIDDEN,
    "CANNOT_CHANGE_OWN_ROLE": status.HTTP_403_FORBIDDEN,
    "CANNOT_DELETE_SELF": status.HTTP_403_FORBIDDEN,
}


def _parse_user_id(user_id: str) -> UserId:
    try:
        return UserId.parse(user_id)
    except ValueError:
        raise ClientError(
            Error("INVALID_USER_ID", "Invalid user ID format"),
            status_code=status.HTTP_400_BAD_REQUEST,
        )


class CreateUserRequest(BaseModel):
    """Create user HTTP request payload"""

    email: EmailStr = Field(..., description="Email address of the new user")
    role: UserRole = Field(UserRole.member, description="Role (owner/admin/member)")
    email_confirmed: bool = Field(False, description="Whether the email is already confirmed")


class UpdateUserRequest(BaseModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    title: Optional[str] = None


class ChangeUserRoleRequest(BaseModel):
    role: UserRole = Field(..., description="New role (owner/admin/member)")


class UpdateAvatarRequest(BaseModel):
    url: str = Field(..., description="Public URL of the avatar image")


@router.get("", status_code=status.HTTP_200_OK, response_model=SearchUsersResponse)
async def search_users(
    search: Optional[str] = Query(None),
    role: Optional[UserRole] = Query(None),
    page_offset: int = Query(0, ge=0, le=MAX_PAGE_OFFSET),
    page_size: int = Query(25),
    current_user: UserInfo = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Search Users

    Pages through the users of the caller's tenant.

    Raises:
        - 400 Bad Request: Invalid paging or search term
        - 401 Unauthorized: Invalid or expired JWT
    """
    query = SearchUsersQuery(
        tenant_id=tenant_of(current_user),
        search=search,
        role=role,
        page_offset=page_offset,
        page_size=page_size,
    )

    use_case = SearchUsersUseCase(uow)
    result = await use_case.execute(query)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post("", status_code=status.HTTP_201_CREATED, response_model=CreateUserResponse)
async def create_user(
    request: CreateUserRequest,
    current_user: UserInfo = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create User

    Raises:
        - 400 Bad Request: Email invalid or already used in the tenant
        - 401 Unauthorized: Invalid or expired JWT
        - 403 Forbidden: INSUFFICIENT_ROLE (only owners create users)
    """
    command = CreateUserCommand(
        tenant_id=tenant_of(current_user),
        email=request.email,
        role=request.role,
        email_confirmed=request.email_confirmed,
        executing_user_role=role_of(current_user),
    )

    use_case = CreateUserUseCase(uow)
    result = await use_case.execute(command)

    if result.is_err():
        raise_for_error(result.error, ROLE_ERRORS)

    return result.value


@router.get("/{user_id}", status_code=status.HTTP_200_OK, response_model=UserResponse)
async def get_user(
    user_id: str,
    current_user: UserInfo = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Get User

    Raises:
        - 400 Bad Request: Invalid user_id format
        - 401 Unauthorized: Invalid or expired JWT
        - 404 Not Found: User not found in the caller's tenant
    """
    query = GetUserQuery(tenant_id=tenant_of(current_user), id=_parse_user_id(user_id))

    use_case = GetUserUseCase(uow)
    result = await use_case.execute(query)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.put("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_user(
    user_id: str,
    request: UpdateUserRequest,
    current_user: UserInfo = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update User

    Raises:
        - 400 Bad Request: Invalid user_id or profile fields
        - 401 Unauthorized: Invalid or expired JWT
        - 404 Not Found: User not found in the caller's tenant
    """
    command = UpdateUserCommand(
        tenant_id=tenant_of(current_user),
        id=_parse_user_id(user_id),
        first_name=request.first_name,
        last_name=request.last_name,
        title=request.title,
    )

    use_case = UpdateUserUseCase(uow)
    result = await use_case.execute(command)

    if result.is_err():
        raise_for_error(result.error)

    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put("/{user_id}/change-user-role", status_code=status.HTTP_204_NO_CONTENT)
async def change_user_role(
    user_id: str,
    request: ChangeUserRoleRequest,
    current_user: UserInfo = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Change User Role

    Raises:
        - 400 Bad Request: Invalid user_id format
        - 401 Unauthorized: Invalid or expired JWT
        - 403 Forbidden: INSUFFICIENT_ROLE, CANNOT_CHANGE_OWN_ROLE
        - 404 Not Found: User not found in the caller's tenant
    """
    command = ChangeUserRoleCommand(
        tenant_id=tenant_of(current_user),
        id=_parse_user_id(user_id),
        role=request.role,
        executing_user_id=user_id_of(current_user),
        executing_user_role=role_of(current_user),
    )

    use_case = ChangeUserRoleUseCase(uow)
    result = await use_case.execute(command)

    if result.is_err():
        raise_for_error(result.error, ROLE_ERRORS)

    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: str,
    current_user: UserInfo = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Delete User

    Raises:
        - 400 Bad Request: Invalid user_id format
        - 401 Unauthorized: Invalid or expired JWT
        - 403 Forbidden: INSUFFICIENT_ROLE, CANNOT_DELETE_SELF
        - 404 Not Found: User not found in the caller's tenant
    """
    command = DeleteUserCommand(
        tenant_id=tenant_of(current_user),
        id=_parse_user_id(user_id),
        executing_user_id=user_id_of(current_user),
        executing_user_role=role_of(current_user),
    )

    use_case = DeleteUserUseCase(uow)
    result = await use_case.execute(command)

    if result.is_err():
        raise_for_error(result.error, ROLE_ERRORS)

    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put("/{user_id}/avatar", status_code=status.HTTP_204_NO_CONTENT)
async def update_avatar(
    user_id: str,
    request: UpdateAvatarRequest,
    current_user: UserInfo = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    command = UpdateAvatarCommand(
        tenant_id=tenant_of(current_user), id=_parse_user_id(user_id), url=request.url
    )

    use_case = UpdateAvatarUseCase(uow)
    result = await use_case.execute(command)

    if result.is_err():
        raise_for_error(result.error)

    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{user_id}/avatar", status_code=status.HTTP_204_NO_CONTENT)
async def remove_avatar(
    user_id: str,
    current_user: UserInfo = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    command = RemoveAvatarCommand(
        tenant_id=tenant_of(current_user), id=_parse_user_id(user_id)
    )

    use_case = RemoveAvatarUseCase(uow)
    result = await use_case.execute(command)

    if result.is_err():
        raise_for_error(result.error)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
