from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, EmailStr, Field

from account_management.api.error import ClientError, raise_for_error
from account_management.app.services.email_client import EmailClient
from account_management.app.services.one_time_password import ONE_TIME_PASSWORD_LENGTH
from account_management.app.services.unit_of_work import UnitOfWork
from account_management.app.use_cases.signups import (
    CompleteSignupCommand,
    CompleteSignupResponse,
    CompleteSignupUseCase,
    IsSubdomainFreeQuery,
    IsSubdomainFreeUseCase,
    StartSignupCommand,
    StartSignupResponse,
    StartSignupUseCase,
)
from account_management.depends import get_email_client, get_unit_of_work
from account_management.domain.entities import SignupId
from shared_kernel.result import Error

router = APIRouter(prefix="/signups", tags=["Signups"])


class StartSignupRequest(BaseModel):
    """
    Start signup HTTP request payload

    Validates incoming HTTP request before converting to StartSignupCommand.
    """

    subdomain: str = Field(..., description="Requested tenant subdomain")
    email: EmailStr = Field(..., description="Email address of the tenant owner")


class CompleteSignupRequest(BaseModel):
    one_time_password: str = Field(
        ..., min_length=1, max_length=ONE_TIME_PASSWORD_LENGTH, description="Code sent by email"
    )


class IsSubdomainFreeResponse(BaseModel):
    subdomain: str
    is_free: bool


@router.get(
    "/is-subdomain-free",
    status_code=status.HTTP_200_OK,
    response_model=IsSubdomainFreeResponse,
)
async def is_subdomain_free(
    subdomain: str = Query(..., min_length=1, max_length=30),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = IsSubdomainFreeUseCase(uow)
    result = await use_case.execute(IsSubdomainFreeQuery(subdomain=subdomain))

    if result.is_err():
        raise_for_error(result.error)

    return IsSubdomainFreeResponse(subdomain=subdomain, is_free=result.value)


@router.post(
    "/start", status_code=status.HTTP_201_CREATED, response_model=StartSignupResponse
)
async def start_signup(
    request: StartSignupRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    email_client: EmailClient = Depends(get_email_client),
):
    """
    Start Signup

    Emails a one-time password to confirm the address.

    Raises:
        - 400 Bad Request: Invalid or taken subdomain, invalid email
        - 422 Unprocessable Entity: Malformed payload (handled by FastAPI)
    """
    command = StartSignupCommand(subdomain=request.subdomain, email=request.email)

    use_case = StartSignupUseCase(uow, email_client)
    result = await use_case.execute(command)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "/{signup_id}/complete",
    status_code=status.HTTP_201_CREATED,
    response_model=CompleteSignupResponse,
)
async def complete_signup(
    signup_id: str,
    request: CompleteSignupRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Complete Signup

    Creates the tenant and its owner, and signs the owner in.

    Raises:
        - 400 Bad Request: Invalid signup id, wrong or expired code
        - 403 Forbidden: TOO_MANY_ATTEMPTS
        - 404 Not Found: Signup not found
        - 409 Conflict: SIGNUP_ALREADY_COMPLETED, SUBDOMAIN_TAKEN
    """
    try:
        parsed_signup_id = SignupId.parse(signup_id)
    except ValueError:
        raise ClientError(
            Error("INVALID_SIGNUP_ID", "Invalid signup ID format"),
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    command = CompleteSignupCommand(
        signup_id=parsed_signup_id, one_time_password=request.one_time_password
    )

    use_case = CompleteSignupUseCase(uow)
    result = await use_case.execute(command)

    if result.is_err():
        raise_for_error(
            result.error,
            {
                "INVALID_ONE_TIME_PASSWORD": status.HTTP_400_BAD_REQUEST,
                "SIGNUP_EXPIRED": status.HTTP_400_BAD_REQUEST,
                "TOO_MANY_ATTEMPTS": status.HTTP_403_FORBIDDEN,
                "SIGNUP_ALREADY_COMPLETED": status.HTTP_409_CONFLICT,
                "SUBDOMAIN_TAKEN": status.HTTP_409_CONFLICT,
            },
        )

    return result.value
