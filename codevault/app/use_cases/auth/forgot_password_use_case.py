"""
Forgot Password Use Case

Generates a single-use reset token and emails the reset link.
"""

import logging
from datetime import datetime
from typing import Callable

from codevault.libs.result import Error, Result, Return
from codevault.app.services.auth_settings import AuthSettings
from codevault.app.services.email_sender import IEmailSender
from codevault.app.services.email_templates import password_reset_email
from codevault.app.services.reset_token_generator import ResetTokenGenerator
from codevault.app.services.unit_of_work import UnitOfWork
from codevault.domain.entities import Account
from codevault.domain.time import utc_now
from .dtos import ForgotPasswordResponse

logger = logging.getLogger(__name__)

GENERIC_RESPONSE_MESSAGE = (
    "If an account exists for that email, a password reset link has been sent"
)


class ForgotPasswordUseCase:
    """
    Use case for requesting a password reset.

    Business Rules:
    - 256-bit random token, only its SHA-256 digest is stored
    - Token expires RESET_TOKEN_TTL_MINUTES (15) after the request
    - A new request replaces any outstanding token
    - No email enumeration: unknown emails get the same response and no
      store mutation
    - If the email cannot be sent, the stored digest and expiry are cleared
      again and EMAIL_DELIVERY_FAILED is returned
    """

    def __init__(
        self,
        uow: UnitOfWork,
        email_sender: IEmailSender,
        reset_token_generator: ResetTokenGenerator,
        settings: AuthSettings,
        clock: Callable[[], datetime] = utc_now,
    ):
        if settings is None:
            raise ValueError("AuthSettings is required")
        self.uow = uow
        self.email_sender = email_sender
        self.reset_token_generator = reset_token_generator
        self.settings = settings
        self.clock = clock

    def _build_reset_url(self, plaintext_token: str) -> str:
        return f"{self.settings.frontend_url.rstrip('/')}/reset-password/{plaintext_token}"

    async def execute(self, email: str) -> Result[ForgotPasswordResponse]:
        """
        Execute forgot password use case.

        Args:
            email: Account email address

        Returns:
            Result with the generic response, or Error(EMAIL_DELIVERY_FAILED)
        """
        generic_response = ForgotPasswordResponse(
            status="sent", message=GENERIC_RESPONSE_MESSAGE
        )

        async with self.uow:
            account = await self.uow.accounts.get_by_email(Account.normalize_email(email))

            if account is None:
                logger.info("Password reset requested for an unknown email")
                return Return.ok(generic_response)

            token = self.reset_token_generator.generate()
            expires_at = self.clock() + self.settings.reset_token_ttl

            await self.uow.accounts.set_reset_token(account.id, token.digest, expires_at)
            await self.uow.commit()

            ttl_minutes = int(self.settings.reset_token_ttl.total_seconds() // 60)
            message = password_reset_email(
                to=account.email,
                username=account.username,
                reset_url=self._build_reset_url(token.plaintext),
                ttl_minutes=ttl_minutes,
            )
            try:
                send_result = await self.email_sender.send(message)
            except Exception:
                logger.exception("Email sender raised while sending a password reset link")
                send_result = Return.err(
                    Error("EMAIL_DELIVERY_FAILED", "Email sender raised an exception")
                )

            if send_result.is_err():
                await self.uow.accounts.clear_reset_token(account.id, token.digest)
                await self.uow.commit()
                logger.error(
                    "Password reset email for account %s not sent (%s), reset token cleared",
                    account.id,
                    send_result.error.code,
                )
                return Return.err(
                    Error(
                        "EMAIL_DELIVERY_FAILED",
                        "Could not send the password reset email, please try again later",
                    )
                )

        logger.info("Password reset email sent for account %s", account.id)
        return Return.ok(generic_response)
