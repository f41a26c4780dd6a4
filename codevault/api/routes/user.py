from uuid import UUID

from fastapi import APIRouter, Depends, status

from codevault.api.error import ClientError, ServerError
from codevault.app.services.unit_of_work import UnitOfWork
from codevault.app.use_cases.users import GetProfileUseCase, ProfileView
from codevault.depends import get_current_account, get_unit_of_work

router = APIRouter(prefix="/users", tags=["User"])


@router.get("/profile", status_code=status.HTTP_200_OK, response_model=ProfileView)
async def get_profile(
    current_account: ProfileView = Depends(get_current_account),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Current account profile

    Accepts the access token from the accessToken cookie or, when no cookie
    is sent, from the Authorization: Bearer header.

    Raises:
        - 401 Unauthorized: Missing, invalid or expired token
        - 404 Not Found: Account deleted between authentication and lookup
    """
    use_case = GetProfileUseCase(uow)
    result = await use_case.execute(UUID(current_account.id))

    if result.is_err():
        error = result.error
        if error.code == "ACCOUNT_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value
