"""
Tenant Management Use Cases

All tenant-related business logic.
"""

from .delete_tenant_use_case import (
    DeleteTenantCommand,
    DeleteTenantUseCase,
    DeleteTenantValidator,
)
from .dtos import TenantResponse
from .get_tenant_use_case import GetTenantQuery, GetTenantUseCase
from .update_tenant_use_case import (
    UpdateTenantCommand,
    UpdateTenantUseCase,
    UpdateTenantValidator,
)

__all__ = [
    "DeleteTenantCommand",
    "DeleteTenantUseCase",
    "DeleteTenantValidator",
    "GetTenantQuery",
    "GetTenantUseCase",
    "UpdateTenantCommand",
    "UpdateTenantUseCase",
    "UpdateTenantValidator",
    "TenantResponse",
]
