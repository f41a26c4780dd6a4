from abc import ABC, abstractmethod
from typing import Optional

from pydantic import BaseModel

from codevault.libs.result import Result


class EmailMessage(BaseModel):
    """Outbound email with a plain-text body and an optional HTML alternative"""

    to: str
    subject: str
    text: str
    html: Optional[str] = None


class IEmailSender(ABC):
    """Outbound email capability"""

    @abstractmethod
    async def send(self, message: EmailMessage) -> Result[str]:
        """
        Deliver a message.

        Returns:
            Result with the message id, or Error(EMAIL_DELIVERY_FAILED)
        """
        pass
