"""
Reset Password Use Case

Consumes a reset token and sets a new password.
"""

import asyncio
import logging
from datetime import datetime
from typing import Callable

from codevault.libs.result import Error, Result, Return
from codevault.app.services.password_hasher import PasswordHasher
from codevault.app.services.reset_token_generator import ResetTokenGenerator
from codevault.app.services.unit_of_work import UnitOfWork
from codevault.domain.time import utc_now
from .dtos import ResetPasswordResponse
from .validation import validate_password

logger = logging.getLogger(__name__)

INVALID_OR_EXPIRED_TOKEN = Error(
    "INVALID_OR_EXPIRED_TOKEN", "Invalid or expired password reset token"
)


class ResetPasswordUseCase:
    """
    Use case for completing a password reset.

    Business Rules:
    - Token is matched by its SHA-256 digest and must be unexpired
    - Unknown and expired tokens are reported identically
    - New password hash and the cleared reset fields are written by one
      conditional update, so a token can only be used once
    """

    def __init__(
        self,
        uow: UnitOfWork,
        password_hasher: PasswordHasher,
        reset_token_generator: ResetTokenGenerator,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.uow = uow
        self.password_hasher = password_hasher
        self.reset_token_generator = reset_token_generator
        self.clock = clock

    async def execute(self, token: str, new_password: str) -> Result[ResetPasswordResponse]:
        """
        Execute reset password use case.

        Args:
            token: Plaintext reset token from the email link
            new_password: New password to set

        Returns:
            Result with confirmation status,
            or Error(INVALID_OR_EXPIRED_TOKEN | INVALID_PASSWORD)
        """
        password_validation = validate_password(new_password)
        if password_validation.is_err():
            return Return.err(password_validation.error)

        token_digest = self.reset_token_generator.digest(token)

        async with self.uow:
            now = self.clock()
            account = await self.uow.accounts.get_by_reset_token(token_digest, now)
            if account is None:
                return Return.err(INVALID_OR_EXPIRED_TOKEN)

            password_hash = await asyncio.to_thread(self.password_hasher.hash, new_password)
            applied = await self.uow.accounts.complete_password_reset(
                account.id, token_digest, password_hash, now
            )
            if not applied:
                # Consumed or replaced by a concurrent request
                return Return.err(INVALID_OR_EXPIRED_TOKEN)

            await self.uow.commit()

        logger.info("Password reset completed for account %s", account.id)
        return Return.ok(
            ResetPasswordResponse(
                status="success",
                message="Password reset successful",
            )
        )
