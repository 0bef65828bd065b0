"""
Unit tests for DeleteTenantUseCase

Tests the validation and execution pipeline in isolation with mocked repositories.
"""

import pytest
from pydantic import ValidationError
from unittest.mock import AsyncMock
from account_management.app.use_cases.tenants import DeleteTenantCommand, DeleteTenantUseCase
from account_management.domain.entities import Tenant, TenantId
from shared_kernel.result import FieldError, NOT_FOUND, VALIDATION_FAILED

USERS_REMAIN_MESSAGE = "All users must be deleted before the tenant can be deleted."


@pytest.mark.asyncio
async def test_successful_tenant_deletion(mock_uow):
    """Tenant without users is staged for removal and committed"""
    # Arrange
    tenant = Tenant.create("acme")
    mock_uow.users.count_tenant_users = AsyncMock(return_value=0)
    mock_uow.tenants.get_by_id = AsyncMock(return_value=tenant)
    mock_uow.tenants.remove = AsyncMock()

    use_case = DeleteTenantUseCase(mock_uow)

    # Act
    result = await use_case.execute(DeleteTenantCommand(id=TenantId("acme")))

    # Assert
    assert result.is_ok()
    mock_uow.users.count_tenant_users.assert_awaited_once_with(TenantId("acme"))
    mock_uow.tenants.remove.assert_awaited_once_with(tenant)
    mock_uow.commit.assert_awaited_once()
    mock_uow.__aexit__.assert_awaited_once()


@pytest.mark.asyncio
@pytest.mark.parametrize("user_count", [1, 2, 50])
async def test_delete_tenant_with_users_fails_validation(mock_uow, user_count):
    """Tenant that still owns users is never loaded nor removed"""
    mock_uow.users.count_tenant_users = AsyncMock(return_value=user_count)
    mock_uow.tenants.get_by_id = AsyncMock()
    mock_uow.tenants.remove = AsyncMock()

    use_case = DeleteTenantUseCase(mock_uow)
    result = await use_case.execute(DeleteTenantCommand(id=TenantId("acme")))

    assert result.is_err()
    assert result.is_validation_failure()
    assert result.error.code == VALIDATION_FAILED
    assert result.error.message == USERS_REMAIN_MESSAGE
    assert result.error.field_errors == [FieldError("id", USERS_REMAIN_MESSAGE)]

    mock_uow.tenants.get_by_id.assert_not_awaited()
    mock_uow.tenants.remove.assert_not_awaited()
    mock_uow.commit.assert_not_awaited()
    mock_uow.__aexit__.assert_awaited_once()


@pytest.mark.asyncio
async def test_delete_tenant_not_found(mock_uow):
    """Unknown tenant returns NotFound without raising"""
    mock_uow.users.count_tenant_users = AsyncMock(return_value=0)
    mock_uow.tenants.get_by_id = AsyncMock(return_value=None)
    mock_uow.tenants.remove = AsyncMock()

    use_case = DeleteTenantUseCase(mock_uow)
    result = await use_case.execute(DeleteTenantCommand(id=TenantId("ghost")))

    assert result.is_not_found()
    assert result.error.code == NOT_FOUND
    assert result.error.message == "Tenant with id 'ghost' not found."
    mock_uow.tenants.remove.assert_not_awaited()
    mock_uow.commit.assert_not_awaited()


@pytest.mark.asyncio
async def test_delete_tenant_infrastructure_fault_propagates(mock_uow):
    """Repository failures are not turned into results"""
    mock_uow.users.count_tenant_users = AsyncMock(side_effect=RuntimeError("db down"))

    use_case = DeleteTenantUseCase(mock_uow)

    with pytest.raises(RuntimeError, match="db down"):
        await use_case.execute(DeleteTenantCommand(id=TenantId("acme")))

    mock_uow.commit.assert_not_awaited()
    mock_uow.__aexit__.assert_awaited_once()


def test_delete_tenant_command_is_immutable():
    command = DeleteTenantCommand(id=TenantId("acme"))

    with pytest.raises(ValidationError):
        command.id = TenantId("other")
