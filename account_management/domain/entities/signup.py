"""
Signup Entity

A pending request to create a tenant, confirmed with a one-time password
sent by email.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from typing import Optional

from .ids import SignupId, TenantId


@dataclass
class Signup:
    """
    Signup entity - pending tenant creation.

    Business Rules:
    - The one-time password is stored as a bcrypt hash only
    - A signup expires after its validity window
    - Too many wrong attempts lock the signup
    - A signup can only be completed once
    """

    id: SignupId
    tenant_id: TenantId
    email: str
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
        email: str,
        one_time_password_hash: str,
        valid_for: timedelta,
    ) -> "Signup":
        now = datetime.now(UTC)
        return cls(
            id=SignupId.new(),
            tenant_id=tenant_id,
            email=email.lower(),
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
