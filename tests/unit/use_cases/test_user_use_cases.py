"""
Unit tests for the user management use cases
"""

import pytest
from pydantic import ValidationError
from unittest.mock import AsyncMock

from account_management.app.use_cases.users import (
    MAX_PAGE_OFFSET,
    ChangeUserRoleCommand,
    ChangeUserRoleUseCase,
    CreateUserCommand,
    CreateUserUseCase,
    DeleteUserCommand,
    DeleteUserUseCase,
    GetUserQuery,
    GetUserUseCase,
    RemoveAvatarCommand,
    RemoveAvatarUseCase,
    SearchUsersQuery,
    SearchUsersUseCase,
    UpdateAvatarCommand,
    UpdateAvatarUseCase,
    UpdateUserCommand,
    UpdateUserUseCase,
)
from account_management.domain.entities import Tenant, TenantId, User, UserId, UserRole

ACME = TenantId("acme")


def make_user(
    tenant_id: TenantId = ACME, role: UserRole = UserRole.member, email: str = "jane@acme.com"
) -> User:
    return User.create(
        tenant_id=tenant_id,
        email=email,
        role=role,
        email_confirmed=True,
    )


@pytest.mark.asyncio
async def test_create_user(mock_uow):
    mock_uow.users.get_by_email = AsyncMock(return_value=None)
    mock_uow.tenants.get_by_id = AsyncMock(return_value=Tenant.create("acme"))
    mock_uow.users.add = AsyncMock()

    result = await CreateUserUseCase(mock_uow).execute(
        CreateUserCommand(
            tenant_id=ACME,
            email="New.User@Acme.com",
            role=UserRole.admin,
            executing_user_role=UserRole.owner,
        )
    )

    assert result.is_ok()
    user = mock_uow.users.add.await_args[0][0]
    assert str(user.id) == result.value.id
    assert user.email == "new.user@acme.com"
    assert user.role == UserRole.admin
    mock_uow.users.get_by_email.assert_awaited_once_with(ACME, "New.User@Acme.com")
    mock_uow.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_create_user_duplicate_email(mock_uow):
    mock_uow.users.get_by_email = AsyncMock(return_value=make_user())
    mock_uow.users.add = AsyncMock()

    result = await CreateUserUseCase(mock_uow).execute(
        CreateUserCommand(tenant_id=ACME, email="jane@acme.com", executing_user_role=UserRole.owner)
    )

    assert result.is_validation_failure()
    assert (
        result.error.field_errors[0].message
        == "The email 'jane@acme.com' is already in use by another user on this tenant."
    )
    mock_uow.users.add.assert_not_awaited()


@pytest.mark.asyncio
async def test_create_user_invalid_email_skips_lookup(mock_uow):
    mock_uow.users.get_by_email = AsyncMock(return_value=None)

    result = await CreateUserUseCase(mock_uow).execute(
        CreateUserCommand(tenant_id=ACME, email="nope", executing_user_role=UserRole.owner)
    )

    assert result.error.field_errors[0].message == "Email must be in a valid format."
    mock_uow.users.get_by_email.assert_not_awaited()


@pytest.mark.asyncio
async def test_create_user_requires_owner(mock_uow):
    mock_uow.users.get_by_email = AsyncMock(return_value=None)
    mock_uow.users.add = AsyncMock()

    result = await CreateUserUseCase(mock_uow).execute(
        CreateUserCommand(tenant_id=ACME, email="bob@acme.com", executing_user_role=UserRole.member)
    )

    assert result.error.code == "INSUFFICIENT_ROLE"
    mock_uow.users.add.assert_not_awaited()
    mock_uow.commit.assert_not_awaited()


@pytest.mark.asyncio
async def test_get_user_from_other_tenant_is_not_found(mock_uow):
    other = make_user(tenant_id=TenantId("globex"))
    mock_uow.users.get_by_id = AsyncMock(return_value=other)

    result = await GetUserUseCase(mock_uow).execute(GetUserQuery(tenant_id=ACME, id=other.id))

    assert result.is_not_found()
    assert result.error.message == f"User with id '{other.id}' not found."


@pytest.mark.asyncio
async def test_get_user(mock_uow):
    user = make_user()
    mock_uow.users.get_by_id = AsyncMock(return_value=user)

    result = await GetUserUseCase(mock_uow).execute(GetUserQuery(tenant_id=ACME, id=user.id))

    assert result.is_ok()
    assert result.value.email == "jane@acme.com"
    assert result.value.avatar.version == 0


@pytest.mark.asyncio
async def test_search_users_paging(mock_uow):
    users = [make_user(email=f"user{i}@acme.com") for i in range(2)]
    mock_uow.users.search = AsyncMock(return_value=(users, 7))

    result = await SearchUsersUseCase(mock_uow).execute(
        SearchUsersQuery(tenant_id=ACME, search="user", page_offset=1, page_size=5)
    )

    assert result.is_ok()
    assert result.value.total_count == 7
    assert result.value.total_pages == 2
    assert result.value.current_page_offset == 1
    assert len(result.value.users) == 2
    mock_uow.users.search.assert_awaited_once_with(ACME, "user", None, offset=5, limit=5)
    mock_uow.commit.assert_not_awaited()


@pytest.mark.asyncio
@pytest.mark.parametrize("page_size", [0, 101])
async def test_search_users_invalid_page_size(mock_uow, page_size):
    mock_uow.users.search = AsyncMock()

    result = await SearchUsersUseCase(mock_uow).execute(
        SearchUsersQuery(tenant_id=ACME, page_size=page_size)
    )

    assert result.is_validation_failure()
    assert result.error.field_errors[0].field == "page_size"
    mock_uow.users.search.assert_not_awaited()


@pytest.mark.asyncio
async def test_update_user(mock_uow):
    user = make_user()
    mock_uow.users.get_by_id = AsyncMock(return_value=user)
    mock_uow.users.update = AsyncMock()

    result = await UpdateUserUseCase(mock_uow).execute(
        UpdateUserCommand(
            tenant_id=ACME, id=user.id, first_name="Jane", last_name="Doe", title="CTO"
        )
    )

    assert result.is_ok()
    assert (user.first_name, user.last_name, user.title) == ("Jane", "Doe", "CTO")
    mock_uow.users.update.assert_awaited_once_with(user)


@pytest.mark.asyncio
async def test_update_user_too_long_fields(mock_uow):
    result = await UpdateUserUseCase(mock_uow).execute(
        UpdateUserCommand(tenant_id=ACME, id=UserId.new(), first_name="x" * 31, title="y" * 51)
    )

    assert [f.field for f in result.error.field_errors] == ["first_name", "title"]


@pytest.mark.asyncio
async def test_change_own_role_is_forbidden(mock_uow):
    owner = make_user(role=UserRole.owner)
    mock_uow.users.get_by_id = AsyncMock(return_value=owner)

    result = await ChangeUserRoleUseCase(mock_uow).execute(
        ChangeUserRoleCommand(
            tenant_id=ACME,
            id=owner.id,
            role=UserRole.member,
            executing_user_id=owner.id,
            executing_user_role=UserRole.owner,
        )
    )

    assert result.error.code == "CANNOT_CHANGE_OWN_ROLE"
    assert result.error.message == "You cannot change your own user role."
    assert owner.role == UserRole.owner


@pytest.mark.asyncio
async def test_change_user_role(mock_uow):
    owner = make_user(role=UserRole.owner)
    member = make_user(email="bob@acme.com")
    mock_uow.users.get_by_id = AsyncMock(return_value=member)
    mock_uow.users.update = AsyncMock()

    result = await ChangeUserRoleUseCase(mock_uow).execute(
        ChangeUserRoleCommand(
            tenant_id=ACME,
            id=member.id,
            role=UserRole.admin,
            executing_user_id=owner.id,
            executing_user_role=UserRole.owner,
        )
    )

    assert result.is_ok()
    assert member.role == UserRole.admin
    mock_uow.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_delete_self_is_forbidden(mock_uow):
    owner = make_user(role=UserRole.owner)
    mock_uow.users.remove = AsyncMock()

    result = await DeleteUserUseCase(mock_uow).execute(
        DeleteUserCommand(
            tenant_id=ACME,
            id=owner.id,
            executing_user_id=owner.id,
            executing_user_role=UserRole.owner,
        )
    )

    assert result.error.code == "CANNOT_DELETE_SELF"
    mock_uow.users.remove.assert_not_awaited()


@pytest.mark.asyncio
async def test_delete_user(mock_uow):
    owner = make_user(role=UserRole.owner)
    member = make_user(email="bob@acme.com")
    mock_uow.users.get_by_id = AsyncMock(return_value=member)
    mock_uow.users.remove = AsyncMock()

    result = await DeleteUserUseCase(mock_uow).execute(
        DeleteUserCommand(
            tenant_id=ACME,
            id=member.id,
            executing_user_id=owner.id,
            executing_user_role=UserRole.owner,
        )
    )

    assert result.is_ok()
    mock_uow.users.remove.assert_awaited_once_with(member)
    mock_uow.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_delete_user_requires_owner(mock_uow):
    admin = make_user(role=UserRole.admin)

    result = await DeleteUserUseCase(mock_uow).execute(
        DeleteUserCommand(
            tenant_id=ACME,
            id=UserId.new(),
            executing_user_id=admin.id,
            executing_user_role=UserRole.admin,
        )
    )

    assert result.error.code == "INSUFFICIENT_ROLE"


@pytest.mark.asyncio
async def test_update_and_remove_avatar_bump_version(mock_uow):
    user = make_user()
    mock_uow.users.get_by_id = AsyncMock(return_value=user)
    mock_uow.users.update = AsyncMock()

    result = await UpdateAvatarUseCase(mock_uow).execute(
        UpdateAvatarCommand(tenant_id=ACME, id=user.id, url="https://cdn.example.com/a.png")
    )
    assert result.is_ok()
    assert user.avatar.url == "https://cdn.example.com/a.png"
    assert user.avatar.version == 1
    assert user.avatar.is_gravatar is False

    result = await RemoveAvatarUseCase(mock_uow).execute(
        RemoveAvatarCommand(tenant_id=ACME, id=user.id)
    )
    assert result.is_ok()
    assert user.avatar.url is None
    assert user.avatar.version == 1


@pytest.mark.asyncio
async def test_update_avatar_rejects_non_http_url(mock_uow):
    result = await UpdateAvatarUseCase(mock_uow).execute(
        UpdateAvatarCommand(tenant_id=ACME, id=UserId.new(), url="javascript:alert(1)")
    )

    assert result.is_validation_failure()


@pytest.mark.asyncio
async def test_member_is_denied_before_email_lookup(mock_uow):
    """A member must not learn which emails are taken"""
    mock_uow.users.get_by_email = AsyncMock(return_value=make_user())
    mock_uow.users.add = AsyncMock()

    result = await CreateUserUseCase(mock_uow).execute(
        CreateUserCommand(tenant_id=ACME, email="jane@acme.com", executing_user_role=UserRole.member)
    )

    assert result.error.code == "INSUFFICIENT_ROLE"
    assert not result.is_validation_failure()
    mock_uow.users.get_by_email.assert_not_awaited()
    mock_uow.users.add.assert_not_awaited()


@pytest.mark.parametrize(
    "command_type, fields",
    [
        (CreateUserCommand, {"tenant_id": ACME, "email": "bob@acme.com"}),
        (
            ChangeUserRoleCommand,
            {
                "tenant_id": ACME,
                "id": UserId.new(),
                "role": UserRole.admin,
                "executing_user_id": UserId.new(),
            },
        ),
        (
            DeleteUserCommand,
            {"tenant_id": ACME, "id": UserId.new(), "executing_user_id": UserId.new()},
        ),
    ],
)
def test_executing_role_is_required(command_type, fields):
    with pytest.raises(ValidationError):
        command_type(**fields)


@pytest.mark.asyncio
async def test_admin_cannot_change_roles(mock_uow):
    mock_uow.users.get_by_id = AsyncMock()

    result = await ChangeUserRoleUseCase(mock_uow).execute(
        ChangeUserRoleCommand(
            tenant_id=ACME,
            id=UserId.new(),
            role=UserRole.owner,
            executing_user_id=UserId.new(),
            executing_user_role=UserRole.admin,
        )
    )

    assert result.error.code == "INSUFFICIENT_ROLE"
    mock_uow.users.get_by_id.assert_not_awaited()


@pytest.mark.asyncio
@pytest.mark.parametrize("page_offset", [-1, MAX_PAGE_OFFSET + 1, 10**18])
async def test_search_users_invalid_page_offset(mock_uow, page_offset):
    mock_uow.users.search = AsyncMock()

    result = await SearchUsersUseCase(mock_uow).execute(
        SearchUsersQuery(tenant_id=ACME, page_offset=page_offset)
    )

    assert result.error.field_errors[0].field == "page_offset"
    mock_uow.users.search.assert_not_awaited()
