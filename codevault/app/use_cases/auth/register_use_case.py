"""
Register Use Case

Creates an account and issues its first access/refresh token pair.
"""

import asyncio
import logging
from datetime import datetime
from typing import Callable

from codevault.libs.result import Error, Result, Return
from codevault.app.services.password_hasher import PasswordHasher
from codevault.app.services.token_codec import TokenCodec
from codevault.app.services.unit_of_work import UnitOfWork
from codevault.domain.entities import Account
from codevault.domain.exceptions import DuplicateAccountError
from codevault.domain.time import utc_now
from .register_dto import AccountInfo, RegisterCommand, RegisterResponse
from .validation import validate_password

logger = logging.getLogger(__name__)

ACCOUNT_ALREADY_EXISTS = Error(
    "ACCOUNT_ALREADY_EXISTS", "An account with this username or email already exists"
)


class RegisterUseCase:
    """
    Register Use Case

    Command/Response Pattern:
    - Input: RegisterCommand (validated business intent)
    - Output: Result[RegisterResponse] (structured response)

    Business Logic:
    1. Validate password length
    2. Normalize username and email (trimmed, lower-cased)
    3. Check if username or email already exists
    4. Hash password with bcrypt
    5. Insert the account; the store's unique indexes are the real guard,
       so a concurrent registration that slipped past step 3 still ends
       in ACCOUNT_ALREADY_EXISTS
    6. Issue access and refresh tokens bound to the new account id
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

    async def execute(self, command: RegisterCommand) -> Result[RegisterResponse]:
        """
        Execute register use case

        Args:
            command: RegisterCommand with username, email, password

        Returns:
            Result[RegisterResponse] with account data and tokens,
            or Error(ACCOUNT_ALREADY_EXISTS | INVALID_USERNAME | INVALID_PASSWORD)
        """
        password_validation = validate_password(command.password)
        if password_validation.is_err():
            return Return.err(password_validation.error)

        username = Account.normalize_username(command.username)
        email = Account.normalize_email(command.email)
        if not username:
            return Return.err(Error("INVALID_USERNAME", "Username is required"))
        if "@" in username:
            # Login reads any identity containing "@" as an email address
            return Return.err(Error("INVALID_USERNAME", "Username must not contain \"@\""))

        async with self.uow:
            if await self.uow.accounts.get_by_email(email) is not None:
                return Return.err(ACCOUNT_ALREADY_EXISTS)
            if await self.uow.accounts.get_by_username(username) is not None:
                return Return.err(ACCOUNT_ALREADY_EXISTS)

            password_hash = await asyncio.to_thread(self.password_hasher.hash, command.password)
            now = self.clock()
            account = Account(
                username=username,
                email=email,
                password_hash=password_hash,
                created_at=now,
                updated_at=now,
            )

            try:
                account = await self.uow.accounts.create(account)
                await self.uow.commit()
            except DuplicateAccountError:
                logger.info("Registration lost a uniqueness race")
                return Return.err(ACCOUNT_ALREADY_EXISTS)

        tokens = self.token_codec.issue_pair(account.id, now=now)
        logger.info("Registered account %s", account.id)

        return Return.ok(
            RegisterResponse(
                message="User registered successfully",
                account=AccountInfo.from_account(account),
                access_token=tokens.access_token,
                refresh_token=tokens.refresh_token,
            )
        )
