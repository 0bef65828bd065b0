"""
Account Management Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import TenantState, UserRole

# Export identifiers
from .ids import LoginId, SignupId, TenantId, UserId

# Export all entities
from .login import Login
from .signup import Signup
from .tenant import Tenant
from .user import Avatar, User

__all__ = [
    # Enums
    "TenantState",
    "UserRole",
    # Identifiers
    "TenantId",
    "UserId",
    "SignupId",
    "LoginId",
    # Entities
    "Tenant",
    "User",
    "Avatar",
    "Signup",
    "Login",
]
