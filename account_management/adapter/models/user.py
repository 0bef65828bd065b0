"""
User storage row
"""

from datetime import datetime
from typing import Any, Dict, Optional
from uuid import UUID

from sqlalchemy import JSON
from sqlmodel import Column, DateTime, Field, Index, SQLModel


class UserModel(SQLModel, table=True):
    """
    Row of the users table.

    tenant_id references tenants.id; the avatar is embedded as a JSON document.
    """

    __tablename__ = "users"

    id: UUID = Field(primary_key=True)
    tenant_id: str = Field(foreign_key="tenants.id", nullable=False, index=True)
    email: str = Field(max_length=100)
    first_name: Optional[str] = Field(default=None, max_length=30)
    last_name: Optional[str] = Field(default=None, max_length=30)
    title: Optional[str] = Field(default=None, max_length=50)
    role: str = Field(max_length=20)
    email_confirmed: bool = Field(default=False)

    avatar: Dict[str, Any] = Field(default_factory=dict, sa_column=Column(JSON))

    # Timestamps
    created_at: datetime = Field(sa_column=Column(DateTime(timezone=True), nullable=False))
    modified_at: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime(timezone=True))
    )

    __table_args__ = (
        Index("idx_user_tenant_email", "tenant_id", "email", unique=True),
    )
