import pytest

from account_management.domain.entities import UserRole
from tests.utils.auth import auth_headers


@pytest.mark.asyncio
async def test_owner_renames_tenant(client, seed, test_data):
    _, (owner,) = await seed("acme", users=(("owner@acme.com", UserRole.owner),))
    headers = auth_headers(owner)

    response = await client.put(
        "/tenants/acme", json=test_data.get_copy("update_tenant_request"), headers=headers
    )
    assert response.status_code == 204

    response = await client.get("/tenants/acme", headers=headers)
    assert response.json()["name"] == "Acme Corporation"
    assert response.json()["modified_at"] is not None


@pytest.mark.asyncio
async def test_rename_rejects_long_name(client, seed):
    _, (owner,) = await seed("acme", users=(("owner@acme.com", UserRole.owner),))

    response = await client.put(
        "/tenants/acme", json={"name": "x" * 31}, headers=auth_headers(owner)
    )

    assert response.status_code == 400
    assert response.json()["error"]["errors"][0]["field"] == "name"


@pytest.mark.asyncio
async def test_admin_cannot_rename_tenant(client, seed):
    _, (admin,) = await seed("acme", users=(("admin@acme.com", UserRole.admin),))

    response = await client.put(
        "/tenants/acme", json={"name": "Acme"}, headers=auth_headers(admin)
    )

    assert response.status_code == 403
    assert response.json()["error"]["code"] == "INSUFFICIENT_ROLE"


@pytest.mark.asyncio
async def test_get_other_tenant_is_forbidden(client, seed):
    _, (owner,) = await seed("acme", users=(("owner@acme.com", UserRole.owner),))
    await seed("globex")

    response = await client.get("/tenants/globex", headers=auth_headers(owner))

    assert response.status_code == 403
