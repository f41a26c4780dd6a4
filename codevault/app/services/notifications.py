"""
Best-effort account notifications.

Delivery failures are logged and never propagated: a welcome or sign-in
email that cannot be sent must not fail the request that triggered it.
"""

import logging

from codevault.app.services import email_templates
from codevault.app.services.email_sender import EmailMessage, IEmailSender

logger = logging.getLogger(__name__)


class AccountNotifier:
    def __init__(self, email_sender: IEmailSender):
        self.email_sender = email_sender

    async def _deliver(self, kind: str, message: EmailMessage) -> bool:
        result = await self.email_sender.send(message)
        if result.is_err():
            logger.warning(
                "Best-effort %s notification not delivered: %s",
                kind,
                result.error.code,
            )
            return False
        logger.info("Sent %s notification (message id %s)", kind, result.value)
        return True

    async def send_welcome(self, email: str, username: str) -> bool:
        return await self._deliver("welcome", email_templates.welcome_email(email, username))

    async def send_login_alert(self, email: str, username: str) -> bool:
        return await self._deliver(
            "login", email_templates.login_alert_email(email, username)
        )

