"""
Login Use Case DTOs (Data Transfer Objects)
"""

from pydantic import BaseModel


class StartLoginResponse(BaseModel):
    """Pending login awaiting its one-time password"""

    login_id: str
    valid_for_seconds: int


class CompleteLoginResponse(BaseModel):
    tenant_id: str
    user_id: str
    access_token: str
