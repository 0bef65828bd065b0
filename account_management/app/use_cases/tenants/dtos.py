"""
Tenant Use Case DTOs (Data Transfer Objects)
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from account_management.domain.entities import Tenant


class TenantResponse(BaseModel):
    """Tenant details"""

    id: str
    name: str
    state: str
    created_at: datetime
    modified_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, tenant: Tenant) -> "TenantResponse":
        return cls(
            id=tenant.id.value,
            name=tenant.name,
            state=tenant.state.value,
            created_at=tenant.created_at,
            modified_at=tenant.modified_at,
        )
