"""
Session Guard

Resolves the account behind a request's access token.

Token precedence: the access token cookie wins. The Authorization header
("Bearer <token>") is only consulted when no cookie value is present; an
empty cookie counts as absent. A bad cookie is never retried with the header.

Every failure (no token, bad signature, expired, account deleted since the
token was issued) is the same UNAUTHENTICATED error.
"""

from datetime import datetime
from typing import Callable, Optional

from codevault.libs.result import Error, Result, Return
from codevault.app.services.token_codec import TokenCodec
from codevault.app.services.unit_of_work import UnitOfWork
from codevault.app.use_cases.users.dtos import ProfileView
from codevault.domain.time import utc_now

UNAUTHENTICATED = Error("UNAUTHENTICATED", "Unauthorized: invalid or missing token")

BEARER_PREFIX = "bearer "


def extract_token(cookie_token: Optional[str], authorization: Optional[str]) -> Optional[str]:
    """Pick the token to verify: cookie first, then Authorization bearer header"""
    if cookie_token and cookie_token.strip():
        return cookie_token.strip()

    if authorization and authorization.lower().startswith(BEARER_PREFIX):
        token = authorization[len(BEARER_PREFIX):].strip()
        if token:
            return token

    return None


class SessionGuard:
    def __init__(
        self,
        uow: UnitOfWork,
        token_codec: TokenCodec,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.uow = uow
        self.token_codec = token_codec
        self.clock = clock

    async def authenticate(
        self, cookie_token: Optional[str], authorization: Optional[str]
    ) -> Result[ProfileView]:
        token = extract_token(cookie_token, authorization)
        if token is None:
            return Return.err(UNAUTHENTICATED)

        claims = self.token_codec.verify_access(token, now=self.clock())
        if claims is None:
            return Return.err(UNAUTHENTICATED)

        async with self.uow:
            account = await self.uow.accounts.get_by_id(claims.account_id)
            if account is None:
                return Return.err(UNAUTHENTICATED)

            return Return.ok(ProfileView.from_account(account))
