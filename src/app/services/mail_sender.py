from abc import ABC, abstractmethod
from typing import Optional

from pydantic import BaseModel


class ConfirmationEmail(BaseModel):
    """Rendered transactional email ready for delivery"""

    to: str
    subject: str
    html: str
    text: Optional[str] = None


class IMailSender(ABC):
    """Transactional mail service interface - application layer"""

    @abstractmethod
    async def send(self, message: ConfirmationEmail) -> Optional[str]:
        """
        Deliver one email.

        Returns:
            Provider message id when the provider reports one

        Raises:
            MailServiceError: provider answered with a non-success status
        """
        pass
