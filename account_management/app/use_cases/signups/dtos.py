"""
Signup Use Case DTOs (Data Transfer Objects)
"""

from pydantic import BaseModel


class StartSignupResponse(BaseModel):
    """Pending signup awaiting its one-time password"""

    signup_id: str
    valid_for_seconds: int


class CompleteSignupResponse(BaseModel):
    """New tenant with its owner, signed in"""

    tenant_id: str
    user_id: str
    access_token: str
