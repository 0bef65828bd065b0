"""
Row <-> entity mapping

Explicit conversions between SQLModel storage rows and domain entities.
Typed identifiers are unwrapped on the way in and wrapped on the way out.
"""

from datetime import UTC, datetime
from typing import Optional

from account_management.adapter.models import LoginModel, SignupModel, TenantModel, UserModel
from account_management.domain.entities import (
    Avatar,
    Login,
    LoginId,
    Signup,
    SignupId,
    Tenant,
    TenantId,
    TenantState,
    User,
    UserId,
    UserRole,
)


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    # SQLite drops tzinfo on the way back
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=UTC)


# ============================================================================
# Tenant
# ============================================================================


def tenant_to_domain(row: TenantModel) -> Tenant:
    return Tenant(
        id=TenantId(row.id),
        name=row.name,
        state=TenantState(row.state),
        created_at=_as_utc(row.created_at),
        modified_at=_as_utc(row.modified_at),
    )


def tenant_to_row(tenant: Tenant) -> TenantModel:
    row = TenantModel(id=tenant.id.value)
    apply_tenant(row, tenant)
    return row


def apply_tenant(row: TenantModel, tenant: Tenant) -> None:
    row.name = tenant.name
    row.state = tenant.state.value
    row.created_at = tenant.created_at
    row.modified_at = tenant.modified_at


# ============================================================================
# User
# ============================================================================


def avatar_to_document(avatar: Avatar) -> dict:
    return {
        "url": avatar.url,
        "version": avatar.version,
        "is_gravatar": avatar.is_gravatar,
    }


def avatar_from_document(document: Optional[dict]) -> Avatar:
    if not document:
        return Avatar()
    return Avatar(
        url=document.get("url"),
        version=document.get("version", 0),
        is_gravatar=document.get("is_gravatar", False),
    )


def user_to_domain(row: UserModel) -> User:
    return User(
        id=UserId(row.id),
        tenant_id=TenantId(row.tenant_id),
        email=row.email,
        role=UserRole(row.role),
        email_confirmed=row.email_confirmed,
        first_name=row.first_name,
        last_name=row.last_name,
        title=row.title,
        avatar=avatar_from_document(row.avatar),
        created_at=_as_utc(row.created_at),
        modified_at=_as_utc(row.modified_at),
    )


def user_to_row(user: User) -> UserModel:
    row = UserModel(id=user.id.value, tenant_id=user.tenant_id.value)
    apply_user(row, user)
    return row


def apply_user(row: UserModel, user: User) -> None:
    row.email = user.email
    row.role = user.role.value
    row.email_confirmed = user.email_confirmed
    row.first_name = user.first_name
    row.last_name = user.last_name
    row.title = user.title
    # Assign a fresh dict so the JSON column is flagged dirty
    row.avatar = avatar_to_document(user.avatar)
    row.created_at = user.created_at
    row.modified_at = user.modified_at


# ============================================================================
# Signup
# ============================================================================


def signup_to_domain(row: SignupModel) -> Signup:
    return Signup(
        id=SignupId(row.id),
        tenant_id=TenantId(row.tenant_id),
        email=row.email,
        one_time_password_hash=row.one_time_password_hash,
        valid_until=_as_utc(row.valid_until),
        retry_count=row.retry_count,
        completed=row.completed,
        created_at=_as_utc(row.created_at),
        completed_at=_as_utc(row.completed_at),
    )


def signup_to_row(signup: Signup) -> SignupModel:
    row = SignupModel(id=signup.id.value)
    apply_signup(row, signup)
    return row


def apply_signup(row: SignupModel, signup: Signup) -> None:
    row.tenant_id = signup.tenant_id.value
    row.email = signup.email
    row.one_time_password_hash = signup.one_time_password_hash
    row.valid_until = signup.valid_until
    row.retry_count = signup.retry_count
    row.completed = signup.completed
    row.created_at = signup.created_at
    row.completed_at = signup.completed_at


# ============================================================================
# Login
# ============================================================================


def login_to_domain(row: LoginModel) -> Login:
    return Login(
        id=LoginId(row.id),
        tenant_id=TenantId(row.tenant_id),
        user_id=UserId(row.user_id),
        one_time_password_hash=row.one_time_password_hash,
        valid_until=_as_utc(row.valid_until),
        retry_count=row.retry_count,
        completed=row.completed,
        created_at=_as_utc(row.created_at),
        completed_at=_as_utc(row.completed_at),
    )


def login_to_row(login: Login) -> LoginModel:
    row = LoginModel(id=login.id.value)
    apply_login(row, login)
    return row


def apply_login(row: LoginModel, login: Login) -> None:
    row.tenant_id = login.tenant_id.value
    row.user_id = login.user_id.value
    row.one_time_password_hash = login.one_time_password_hash
    row.valid_until = login.valid_until
    row.retry_count = login.retry_count
    row.completed = login.completed
    row.created_at = login.created_at
    row.completed_at = login.completed_at
