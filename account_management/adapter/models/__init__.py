"""
Storage rows

SQLModel tables backing the domain entities. Rows never leave the adapter
layer; repositories convert them with the functions in adapter.mappers.
"""

from .login import LoginModel
from .signup import SignupModel
from .tenant import TenantModel
from .user import UserModel

__all__ = ["TenantModel", "UserModel", "SignupModel", "LoginModel"]
