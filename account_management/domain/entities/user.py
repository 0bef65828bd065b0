"""
User Entity

Represents a person belonging to exactly one tenant.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Optional

from .enums import UserRole
from .ids import TenantId, UserId


@dataclass
class Avatar:
    """Avatar document embedded in the user"""

    url: Optional[str] = None
    version: int = 0
    is_gravatar: bool = False


@dataclass
class User:
    """
    User entity - a person belonging to exactly one tenant.

    Business Rules:
    - Email is stored lowercased and is unique within a tenant
    - Users cannot change their own role or delete themselves
    """

    id: UserId
    tenant_id: TenantId
    email: str
    role: UserRole = UserRole.member
    email_confirmed: bool = False
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    title: Optional[str] = None
    avatar: Avatar = field(default_factory=Avatar)
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    modified_at: Optional[datetime] = None

    @classmethod
    def create(
        cls,
        tenant_id: TenantId,
        email: str,
        role: UserRole,
        email_confirmed: bool,
    ) -> "User":
        return cls(
            id=UserId.new(),
            tenant_id=tenant_id,
            email=email.lower(),
            role=role,
            email_confirmed=email_confirmed,
        )

    def update(
        self, first_name: Optional[str], last_name: Optional[str], title: Optional[str]
    ) -> None:
        self.first_name = first_name
        self.last_name = last_name
        self.title = title
        self._touch()

    def confirm_email(self) -> None:
        self.email_confirmed = True
        self._touch()

    def change_role(self, role: UserRole) -> None:
        self.role = role
        self._touch()

    def update_avatar(self, url: str, is_gravatar: bool = False) -> None:
        self.avatar = Avatar(
            url=url, version=self.avatar.version + 1, is_gravatar=is_gravatar
        )
        self._touch()

    def remove_avatar(self) -> None:
        self.avatar = Avatar(version=self.avatar.version)
        self._touch()

    def _touch(self) -> None:
        self.modified_at = datetime.now(UTC)
