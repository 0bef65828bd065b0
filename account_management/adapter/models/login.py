"""
Login storage row
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlmodel import Column, DateTime, Field, SQLModel


class LoginModel(SQLModel, table=True):
    """
    Row of the logins table.

    No foreign keys: finished logins outlive the user they signed in.
    """

    __tablename__ = "logins"

    id: UUID = Field(primary_key=True)
    tenant_id: str = Field(max_length=30)
    user_id: UUID = Field(index=True)
    one_time_password_hash: str = Field(max_length=60)
    retry_count: int = Field(default=0)
    completed: bool = Field(default=False)

    valid_until: datetime = Field(sa_column=Column(DateTime(timezone=True), nullable=False))
    created_at: datetime = Field(sa_column=Column(DateTime(timezone=True), nullable=False))
    completed_at: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime(timezone=True))
    )
