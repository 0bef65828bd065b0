"""
Signup Use Cases

Self-service creation of a tenant and its owner.
"""

from .complete_signup_use_case import CompleteSignupCommand, CompleteSignupUseCase
from .dtos import CompleteSignupResponse, StartSignupResponse
from .is_subdomain_free_use_case import IsSubdomainFreeQuery, IsSubdomainFreeUseCase
from .start_signup_use_case import (
    StartSignupCommand,
    StartSignupUseCase,
    StartSignupValidator,
)

__all__ = [
    "StartSignupCommand",
    "StartSignupUseCase",
    "StartSignupValidator",
    "StartSignupResponse",
    "CompleteSignupCommand",
    "CompleteSignupUseCase",
    "CompleteSignupResponse",
    "IsSubdomainFreeQuery",
    "IsSubdomainFreeUseCase",
]
