from fastapi import APIRouter, Depends, status

from account_management.depends import get_user_info
from shared_kernel.user_info import UserInfo

router = APIRouter(tags=["Me"])


@router.get("/me", status_code=status.HTTP_200_OK, response_model=UserInfo)
async def get_me(user_info: UserInfo = Depends(get_user_info)):
    """
    Current Identity

    Returns the identity descriptor resolved from the bearer token and the
    Accept-Language header. Unauthenticated callers get is_authenticated=false
    and a negotiated locale.
    """
    return user_info
