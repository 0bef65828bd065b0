"""
Account Management Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class TenantState(str, Enum):
    """Tenant lifecycle state"""

    trial = "trial"
    active = "active"
    suspended = "suspended"


class UserRole(str, Enum):
    """User role within its tenant"""

    owner = "owner"
    admin = "admin"
    member = "member"
