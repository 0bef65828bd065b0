"""
Use Cases

Organized into domain folders:
- signups/: Self-service tenant creation
- logins/: One-time-code sign-in
- tenants/: Tenant management
- users/: User management

Every use case runs through the pipeline in base.py.
"""

from .base import Command, CommandUseCase, Query, QueryUseCase, UseCase

__all__ = [
    "Command",
    "Query",
    "UseCase",
    "CommandUseCase",
    "QueryUseCase",
]
