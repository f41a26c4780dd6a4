"""
Refresh Token Use Case

Exchanges a valid refresh token for a new access/refresh pair.
"""

from datetime import datetime
from typing import Callable

from codevault.libs.result import Error, Result, Return
from codevault.app.services.token_codec import TokenCodec
from codevault.app.services.unit_of_work import UnitOfWork
from codevault.domain.time import utc_now
from .dtos import RefreshTokenResponse

INVALID_TOKEN = Error("INVALID_TOKEN", "Invalid or expired refresh token")


class RefreshTokenUseCase:
    """
    Business Rules:
    - Refresh token must be signed with the refresh secret and unexpired
    - An access token is never accepted as a refresh token
    - Account must still exist
    - Tokens are stateless; the old refresh token stays valid until it expires
    """

    def __init__(
        self,
        uow: UnitOfWork,
        token_codec: TokenCodec,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.uow = uow
        self.token_codec = token_codec
        self.clock = clock

    async def execute(self, refresh_token: str) -> Result[RefreshTokenResponse]:
        now = self.clock()
        claims = self.token_codec.verify_refresh(refresh_token, now=now)
        if claims is None:
            return Return.err(INVALID_TOKEN)

        async with self.uow:
            account = await self.uow.accounts.get_by_id(claims.account_id)
            if account is None:
                return Return.err(INVALID_TOKEN)

            tokens = self.token_codec.issue_pair(account.id, email=account.email, now=now)

        return Return.ok(
            RefreshTokenResponse(
                access_token=tokens.access_token,
                refresh_token=tokens.refresh_token,
            )
        )
