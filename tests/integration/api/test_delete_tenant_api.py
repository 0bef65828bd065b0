import pytest

from account_management.domain.entities import TenantId, User, UserRole
from tests.utils.auth import auth_headers


def owner_of(tenant_id: str) -> User:
    return User.create(TenantId(tenant_id), "owner@example.com", UserRole.owner, True)


@pytest.mark.asyncio
async def test_delete_tenant_without_users(client, seed):
    await seed("acme")
    headers = auth_headers(owner_of("acme"))

    response = await client.delete("/tenants/acme", headers=headers)

    assert response.status_code == 204
    assert response.content == b""

    response = await client.get("/tenants/acme", headers=headers)
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_delete_tenant_with_users_is_rejected(client, seed):
    _, (owner,) = await seed("acme", users=(("owner@acme.com", UserRole.owner),))

    response = await client.delete("/tenants/acme", headers=auth_headers(owner))

    assert response.status_code == 400
    error = response.json()["error"]
    assert error["code"] == "VALIDATION_FAILED"
    assert error["message"] == "All users must be deleted before the tenant can be deleted."
    assert error["errors"] == [
        {"field": "id", "message": "All users must be deleted before the tenant can be deleted."}
    ]

    response = await client.get("/tenants/acme", headers=auth_headers(owner))
    assert response.status_code == 200


@pytest.mark.asyncio
async def test_delete_unknown_tenant(client):
    response = await client.delete("/tenants/ghost", headers=auth_headers(owner_of("ghost")))

    assert response.status_code == 404
    assert response.json()["error"]["message"] == "Tenant with id 'ghost' not found."


@pytest.mark.asyncio
async def test_delete_other_tenant_is_forbidden(client, seed):
    await seed("acme")
    await seed("globex")

    response = await client.delete("/tenants/globex", headers=auth_headers(owner_of("acme")))

    assert response.status_code == 403
    assert response.json()["error"]["code"] == "FORBIDDEN"


@pytest.mark.asyncio
async def test_delete_tenant_requires_token(client, seed):
    await seed("acme")

    response = await client.delete("/tenants/acme")

    assert response.status_code == 401
