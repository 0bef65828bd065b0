from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel, Field

from account_management.api.error import ClientError, raise_for_error
from account_management.api.utils.current_user import role_of, tenant_of
from account_management.app.services.unit_of_work import UnitOfWork
from account_management.app.use_cases.tenants import (
    DeleteTenantCommand,
    DeleteTenantUseCase,
    GetTenantQuery,
    GetTenantUseCase,
    TenantResponse,
    UpdateTenantCommand,
    UpdateTenantUseCase,
)
from account_management.depends import get_current_user, get_unit_of_work
from account_management.domain.entities import TenantId, UserRole
from shared_kernel.result import Error
from shared_kernel.user_info import UserInfo

router = APIRouter(prefix="/tenants", tags=["Tenant"])


def _own_tenant(tenant_id: str, current_user: UserInfo) -> TenantId:
    """Callers may only address the tenant their token is scoped to"""
    if tenant_of(current_user) != TenantId(tenant_id):
        raise ClientError(
            Error("FORBIDDEN", "You can only access your own tenant"),
            status_code=status.HTTP_403_FORBIDDEN,
        )
    return TenantId(tenant_id)


class UpdateTenantRequest(BaseModel):
    """Update tenant HTTP request payload"""

    name: str = Field(..., description="New tenant name")


@router.get(
    "/{tenant_id}", status_code=status.HTTP_200_OK, response_model=TenantResponse
)
async def get_tenant(
    tenant_id: str,
    current_user: UserInfo = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Get Tenant

    Raises:
        - 401 Unauthorized: Invalid or expired JWT
        - 403 Forbidden: Not the caller's tenant
        - 404 Not Found: Tenant not found
    """
    query = GetTenantQuery(id=_own_tenant(tenant_id, current_user))

    use_case = GetTenantUseCase(uow)
    result = await use_case.execute(query)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.put("/{tenant_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_tenant(
    tenant_id: str,
    request: UpdateTenantRequest,
    current_user: UserInfo = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update Tenant

    Only the tenant owner can rename the tenant.

    Raises:
        - 400 Bad Request: Name fails validation
        - 401 Unauthorized: Invalid or expired JWT
        - 403 Forbidden: Not the caller's tenant, or caller is not owner
        - 404 Not Found: Tenant not found
    """
    own_tenant_id = _own_tenant(tenant_id, current_user)
    if role_of(current_user) != UserRole.owner:
        raise ClientError(
            Error("INSUFFICIENT_ROLE", "Only owners are allowed to update the tenant."),
            status_code=status.HTTP_403_FORBIDDEN,
        )

    use_case = UpdateTenantUseCase(uow)
    result = await use_case.execute(
        UpdateTenantCommand(id=own_tenant_id, name=request.name)
    )

    if result.is_err():
        raise_for_error(result.error)

    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{tenant_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_tenant(
    tenant_id: str,
    current_user: UserInfo = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Delete Tenant

    Removes the tenant. All users must be deleted first.

    Raises:
        - 400 Bad Request: VALIDATION_FAILED (tenant still has users)
        - 401 Unauthorized: Invalid or expired JWT
        - 403 Forbidden: Not the caller's tenant
        - 404 Not Found: Tenant not found
    """
    command = DeleteTenantCommand(id=_own_tenant(tenant_id, current_user))

    use_case = DeleteTenantUseCase(uow)
    result = await use_case.execute(command)

    if result.is_err():
        raise_for_error(result.error)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
