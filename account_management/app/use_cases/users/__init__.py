"""
User Management Use Cases

All user-related business logic.
"""

from .avatar_use_cases import (
    RemoveAvatarCommand,
    RemoveAvatarUseCase,
    UpdateAvatarCommand,
    UpdateAvatarUseCase,
)
from .change_role_use_case import ChangeUserRoleCommand, ChangeUserRoleUseCase
from .create_user_use_case import CreateUserCommand, CreateUserUseCase
from .delete_user_use_case import DeleteUserCommand, DeleteUserUseCase
from .dtos import CreateUserResponse, SearchUsersResponse, UserResponse
from .get_user_use_case import GetUserQuery, GetUserUseCase
from .search_users_use_case import MAX_PAGE_OFFSET, SearchUsersQuery, SearchUsersUseCase
from .update_user_use_case import UpdateUserCommand, UpdateUserUseCase

__all__ = [
    "MAX_PAGE_OFFSET",
    "CreateUserCommand",
    "CreateUserUseCase",
    "CreateUserResponse",
    "GetUserQuery",
    "GetUserUseCase",
    "UserResponse",
    "SearchUsersQuery",
    "SearchUsersUseCase",
    "SearchUsersResponse",
    "UpdateUserCommand",
    "UpdateUserUseCase",
    "ChangeUserRoleCommand",
    "ChangeUserRoleUseCase",
    "DeleteUserCommand",
    "DeleteUserUseCase",
    "UpdateAvatarCommand",
    "UpdateAvatarUseCase",
    "RemoveAvatarCommand",
    "RemoveAvatarUseCase",
]
