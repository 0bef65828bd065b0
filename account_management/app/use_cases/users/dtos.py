"""
User Use Case DTOs (Data Transfer Objects)
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from account_management.domain.entities import User


class AvatarResponse(BaseModel):
    url: Optional[str] = None
    version: int
    is_gravatar: bool


class UserResponse(BaseModel):
    """User details"""

    id: str
    tenant_id: str
    email: str
    role: str
    email_confirmed: bool
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    title: Optional[str] = None
    avatar: AvatarResponse
    created_at: datetime
    modified_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, user: User) -> "UserResponse":
        return cls(
            id=str(user.id),
            tenant_id=user.tenant_id.value,
            email=user.email,
            role=user.role.value,
            email_confirmed=user.email_confirmed,
            first_name=user.first_name,
            last_name=user.last_name,
            title=user.title,
            avatar=AvatarResponse(
                url=user.avatar.url,
                version=user.avatar.version,
                is_gravatar=user.avatar.is_gravatar,
            ),
            created_at=user.created_at,
            modified_at=user.modified_at,
        )


class CreateUserResponse(BaseModel):
    id: str


class SearchUsersResponse(BaseModel):
    """One page of users"""

    total_count: int
    total_pages: int
    current_page_offset: int
    users: List[UserResponse]
