"""
Login Entity

A pending sign-in of an existing user, confirmed with a one-time password
sent by email.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from typing import Optional

from .ids import LoginId, TenantId, UserId


@dataclass
class Login:
    """
    Login entity - pending sign-in.

    Business Rules:
    - Belongs to one user of one tenant
    - Same code rules as a signup: hash only, expiry, attempt limit, single use
    """

    id: LoginId
    tenant_id: TenantId
    user_id: UserId
    one_time_password_hash: str
    valid_until: datetime
    retry_count: int = 0
    completed: bool = False
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    completed_at: Optional[datetime] = None

    @classmethod
    def create(
        cls,
        tenant_id: TenantId,
        user_id: UserId,
        one_time_password_hash: str,
        valid_for: timedelta,
    ) -> "Login":
        now = datetime.now(UTC)
        return cls(
            id=LoginId.new(),
            tenant_id=tenant_id,
            user_id=user_id,
            one_time_password_hash=one_time_password_hash,
            valid_until=now + valid_for,
            created_at=now,
        )

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        return (now or datetime.now(UTC)) > self.valid_until

    def register_invalid_attempt(self) -> None:
        self.retry_count += 1

    def complete(self) -> None:
        self.completed = True
        self.completed_at = datetime.now(UTC)
