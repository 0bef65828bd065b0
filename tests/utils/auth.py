from account_management.api.utils.jwt import create_access_token
from account_management.domain.entities import User


def auth_headers(user: User, **headers) -> dict:
    """Bearer headers for a user, as issued at login"""
    return {"Authorization": f"Bearer {create_access_token(user)}", **headers}
