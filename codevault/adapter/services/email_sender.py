"""
Email sender adapters

SmtpEmailSender delivers through an SMTP server (implicit TLS, STARTTLS or
plain). LoggingEmailSender is used when SMTP is disabled: it only logs that
a message would have been sent.
"""

import asyncio
import logging
import smtplib
import ssl
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from email.utils import make_msgid

from codevault.libs.result import Error, Result, Return
from codevault.app.services.email_sender import EmailMessage, IEmailSender

logger = logging.getLogger(__name__)


class SmtpEmailSender(IEmailSender):
    def __init__(
        self,
        host: str,
        port: int,
        from_email: str,
        from_name: str = "CodeVault",
        user: str = "",
        password: str = "",
        use_tls: bool = False,
        starttls: bool = True,
        timeout: float = 10,
    ):
        self._host = host
        self._port = port
        self._from_email = from_email
        self._from_name = from_name
        self._user = user
        self._password = password
        self._use_tls = use_tls
        self._starttls = starttls
        self._timeout = timeout

    @classmethod
    def from_config(cls, config) -> "SmtpEmailSender":
        return cls(
            host=config.SMTP_HOST,
            port=config.SMTP_PORT,
            from_email=config.SMTP_FROM_EMAIL,
            from_name=config.SMTP_FROM_NAME,
            user=config.SMTP_USER,
            password=config.SMTP_PASSWORD,
            use_tls=config.SMTP_USE_TLS,
            starttls=config.SMTP_STARTTLS,
            timeout=config.SMTP_TIMEOUT_SECONDS,
        )

    def _create_message(self, message: EmailMessage, message_id: str) -> MIMEMultipart:
        msg = MIMEMultipart("alternative")
        msg["Subject"] = message.subject
        msg["From"] = f"{self._from_name} <{self._from_email}>"
        msg["To"] = message.to
        msg["Message-ID"] = message_id

        msg.attach(MIMEText(message.text, "plain"))
        if message.html:
            msg.attach(MIMEText(message.html, "html"))

        return msg

    def _deliver(self, msg: MIMEMultipart) -> None:
        if self._use_tls and not self._starttls:
            # Implicit TLS (port 465)
            context = ssl.create_default_context()
            with smtplib.SMTP_SSL(
                self._host, self._port, context=context, timeout=self._timeout
            ) as server:
                if self._user:
                    server.login(self._user, self._password)
                server.send_message(msg)
        else:
            # STARTTLS (port 587) or plain
            with smtplib.SMTP(self._host, self._port, timeout=self._timeout) as server:
                if self._starttls:
                    server.starttls(context=ssl.create_default_context())
                if self._user:
                    server.login(self._user, self._password)
                server.send_message(msg)

    async def send(self, message: EmailMessage) -> Result[str]:
        if not self._host:
            logger.error("SMTP host not configured")
            return Return.err(Error("EMAIL_NOT_CONFIGURED", "SMTP host not configured"))

        message_id = make_msgid(domain=self._from_email.partition("@")[2] or None)
        msg = self._create_message(message, message_id)

        try:
            await asyncio.to_thread(self._deliver, msg)
        except (smtplib.SMTPException, OSError) as e:
            logger.error("Failed to send email '%s': %s", message.subject, e)
            return Return.err(Error("EMAIL_DELIVERY_FAILED", "Email delivery failed"))

        logger.info("Email '%s' sent, message id %s", message.subject, message_id)
        return Return.ok(message_id)


class LoggingEmailSender(IEmailSender):
    """Stand-in used when SMTP_ENABLED is false"""

    async def send(self, message: EmailMessage) -> Result[str]:
        message_id = make_msgid(domain="codevault.local")
        logger.warning(
            "SMTP disabled, email '%s' not delivered (message id %s)",
            message.subject,
            message_id,
        )
        return Return.ok(message_id)
