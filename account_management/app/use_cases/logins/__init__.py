"""
Login Use Cases

Sign-in of existing users with an emailed one-time password.
"""

from .complete_login_use_case import (
    CompleteLoginCommand,
    CompleteLoginUseCase,
    CompleteLoginValidator,
)
from .dtos import CompleteLoginResponse, StartLoginResponse
from .start_login_use_case import StartLoginCommand, StartLoginUseCase, StartLoginValidator

__all__ = [
    "StartLoginCommand",
    "StartLoginUseCase",
    "StartLoginValidator",
    "StartLoginResponse",
    "CompleteLoginCommand",
    "CompleteLoginUseCase",
    "CompleteLoginValidator",
    "CompleteLoginResponse",
]
