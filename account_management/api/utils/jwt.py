from datetime import UTC, datetime, timedelta
from typing import Optional

from jose import JWTError, jwt

from config import ApplicationConfig
from account_management.domain.entities import User


def create_access_token(user: User, expires_delta: Optional[timedelta] = None) -> str:
    """
    Create JWT access token for a user

    Args:
        user: User the token is issued to
        expires_delta: Token expiration duration (defaults to JWT_EXPIRY_MINUTES)

    Returns:
        JWT token string (HS256) carrying identity and profile claims
    """
    if expires_delta is None:
        expires_delta = timedelta(minutes=ApplicationConfig.JWT_EXPIRY_MINUTES)

    now = datetime.now(UTC)
    payload = {
        "user_id": str(user.id),
        "tenant_id": user.tenant_id.value,
        "role": user.role.value,
        "email": user.email,
        "exp": now + expires_delta,
        "iat": now,
    }
    profile = {
        "first_name": user.first_name,
        "last_name": user.last_name,
        "title": user.title,
        "avatar_url": user.avatar.url,
    }
    payload.update({key: value for key, value in profile.items() if value is not None})
    return jwt.encode(payload, ApplicationConfig.JWT_SECRET, algorithm="HS256")


def verify_jwt(token: str) -> Optional[dict]:
    """
    Verify and decode JWT token

    Args:
        token: JWT token string

    Returns:
        Decoded payload dict or None if invalid
    """
    try:
        payload = jwt.decode(
            token, ApplicationConfig.JWT_SECRET, algorithms=["HS256"]
        )
        return payload
    except JWTError:
        return None
