"""
Get Profile Use Case

Loads the public profile of the authenticated account.
"""

from uuid import UUID

from codevault.libs.result import Error, Result, Return
from codevault.app.services.unit_of_work import UnitOfWork
from .dtos import ProfileView


class GetProfileUseCase:
    """
    Business Rules:
    - Password and reset fields are never returned
    - The account may have been deleted after the token was issued
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, account_id: UUID) -> Result[ProfileView]:
        async with self.uow:
            account = await self.uow.accounts.get_by_id(account_id)
            if account is None:
                return Return.err(Error("ACCOUNT_NOT_FOUND", "Account not found"))

            return Return.ok(ProfileView.from_account(account))
