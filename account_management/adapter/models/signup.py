"""
Signup storage row
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlmodel import Column, DateTime, Field, SQLModel


class SignupModel(SQLModel, table=True):
    """Row of the signups table. tenant_id is the requested subdomain."""

    __tablename__ = "signups"

    id: UUID = Field(primary_key=True)
    tenant_id: str = Field(max_length=30, index=True)
    email: str = Field(max_length=100)
    one_time_password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars
    retry_count: int = Field(default=0)
    completed: bool = Field(default=False)

    valid_until: datetime = Field(sa_column=Column(DateTime(timezone=True), nullable=False))
    created_at: datetime = Field(sa_column=Column(DateTime(timezone=True), nullable=False))
    completed_at: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime(timezone=True))
    )
