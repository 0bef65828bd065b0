"""
Tenant Entity

Represents an isolated workspace for an organization, addressed by subdomain.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Optional

from .enums import TenantState
from .ids import TenantId


@dataclass
class Tenant:
    """
    Tenant entity - isolated workspace for organizations.

    Business Rules:
    - The id is the subdomain chosen at signup and never changes
    - A tenant can only be deleted once it owns no users
    - New tenants start in trial
    """

    id: TenantId
    name: str
    state: TenantState = TenantState.trial
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    modified_at: Optional[datetime] = None

    @classmethod
    def create(cls, subdomain: str) -> "Tenant":
        return cls(id=TenantId(subdomain), name=subdomain)

    def update(self, name: str) -> None:
        self.name = name
        self.modified_at = datetime.now(UTC)
