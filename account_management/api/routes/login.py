from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, EmailStr, Field

from account_management.api.error import ClientError, raise_for_error
from account_management.app.services.email_client import EmailClient
from account_management.app.services.one_time_password import ONE_TIME_PASSWORD_LENGTH
from account_management.app.services.unit_of_work import UnitOfWork
from account_management.app.use_cases.logins import (
    CompleteLoginCommand,
    CompleteLoginResponse,
    CompleteLoginUseCase,
    StartLoginCommand,
    StartLoginResponse,
    StartLoginUseCase,
)
from account_management.depends import get_email_client, get_unit_of_work
from account_management.domain.entities import LoginId, TenantId
from shared_kernel.result import Error

router = APIRouter(prefix="/logins", tags=["Logins"])


class StartLoginRequest(BaseModel):
    subdomain: str = Field(..., min_length=1, max_length=30, description="Tenant subdomain")
    email: EmailStr = Field(..., description="Email address of the user")


class CompleteLoginRequest(BaseModel):
    one_time_password: str = Field(
        ..., min_length=1, max_length=ONE_TIME_PASSWORD_LENGTH, description="Code sent by email"
    )


@router.post("/start", status_code=status.HTTP_201_CREATED, response_model=StartLoginResponse)
async def start_login(
    request: StartLoginRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    email_client: EmailClient = Depends(get_email_client),
):
    """
    Start Login

    Emails a one-time password to the user.

    Raises:
        - 400 Bad Request: Invalid email
        - 404 Not Found: No such user on the tenant
    """
    command = StartLoginCommand(tenant_id=TenantId(request.subdomain), email=request.email)

    use_case = StartLoginUseCase(uow, email_client)
    result = await use_case.execute(command)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "/{login_id}/complete",
    status_code=status.HTTP_200_OK,
    response_model=CompleteLoginResponse,
)
async def complete_login(
    login_id: str,
    request: CompleteLoginRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Complete Login

    Raises:
        - 400 Bad Request: Invalid login id, wrong or expired code
        - 403 Forbidden: TOO_MANY_ATTEMPTS
        - 404 Not Found: Login or user not found
        - 409 Conflict: LOGIN_ALREADY_COMPLETED
    """
    try:
        parsed_login_id = LoginId.parse(login_id)
    except ValueError:
        raise ClientError(
            Error("INVALID_LOGIN_ID", "Invalid login ID format"),
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    command = CompleteLoginCommand(
        login_id=parsed_login_id, one_time_password=request.one_time_password
    )

    use_case = CompleteLoginUseCase(uow)
    result = await use_case.execute(command)

    if result.is_err():
        raise_for_error(
            result.error,
            {
                "INVALID_ONE_TIME_PASSWORD": status.HTTP_400_BAD_REQUEST,
                "LOGIN_EXPIRED": status.HTTP_400_BAD_REQUEST,
                "TOO_MANY_ATTEMPTS": status.HTTP_403_FORBIDDEN,
                "LOGIN_ALREADY_COMPLETED": status.HTTP_409_CONFLICT,
            },
        )

    return result.value
