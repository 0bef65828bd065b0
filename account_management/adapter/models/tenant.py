"""
Tenant storage row
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Column, DateTime, Field, Index, SQLModel


class TenantModel(SQLModel, table=True):
    """Row of the tenants table. The primary key is the subdomain."""

    __tablename__ = "tenants"

    id: str = Field(primary_key=True, max_length=30)
    name: str = Field(max_length=30)
    state: str = Field(max_length=20)

    # Timestamps
    created_at: datetime = Field(sa_column=Column(DateTime(timezone=True), nullable=False))
    modified_at: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime(timezone=True))
    )

    __table_args__ = (Index("idx_tenant_state", "state"),)
