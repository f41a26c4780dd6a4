"""
Login Use Case

Authenticates an account by email or username and issues JWT tokens.
"""

import asyncio
import logging
from datetime import datetime
from typing import Callable, Optional

from codevault.libs.result import Error, Result, Return
from codevault.app.services.password_hasher import PasswordHasher
from codevault.app.services.token_codec import TokenCodec
from codevault.app.services.unit_of_work import UnitOfWork
from codevault.domain.entities import Account
from codevault.domain.time import utc_now
from .dtos import LoginResponse
from .register_dto import AccountInfo

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = Error("INVALID_CREDENTIALS", "Invalid email or password")


class LoginUseCase:
    """
    Use case for account login and JWT issuance.

    Business Rules:
    - Identity containing "@" is looked up as an email, otherwise as a username
    - Unknown account and wrong password return the same error
    - Unknown accounts still pay for a bcrypt verification so timing matches
    - Access token embeds the account email
    """

    def __init__(
        self,
        uow: UnitOfWork,
        password_hasher: PasswordHasher,
        token_codec: TokenCodec,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.uow = uow
        self.password_hasher = password_hasher
        self.token_codec = token_codec
        self.clock = clock

    async def _find_account(self, identity: str) -> Optional[Account]:
        if "@" in identity:
            return await self.uow.accounts.get_by_email(Account.normalize_email(identity))
        return await self.uow.accounts.get_by_username(Account.normalize_username(identity))

    async def execute(self, identity: str, password: str) -> Result[LoginResponse]:
        """
        Execute login use case.

        Args:
            identity: Email or username
            password: Plain text password

        Returns:
            Result with LoginResponse containing tokens, or Error(INVALID_CREDENTIALS)
        """
        async with self.uow:
            account = await self._find_account(identity)

            if account is None:
                await asyncio.to_thread(self.password_hasher.verify_dummy, password)
                return Return.err(INVALID_CREDENTIALS)

            password_valid = await asyncio.to_thread(
                self.password_hasher.verify, password, account.password_hash
            )
            if not password_valid:
                return Return.err(INVALID_CREDENTIALS)

            account_id = account.id
            account_info = AccountInfo.from_account(account)

        tokens = self.token_codec.issue_pair(
            account_id, email=account_info.email, now=self.clock()
        )
        logger.info("Account %s logged in", account_id)

        return Return.ok(
            LoginResponse(
                message="Login successful",
                account=account_info,
                access_token=tokens.access_token,
                refresh_token=tokens.refresh_token,
            )
        )
