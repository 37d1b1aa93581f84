import logging
from typing import Optional

import httpx

from src.app.services.mail_sender import ConfirmationEmail, IMailSender
from src.domain.errors import MailServiceError

logger = logging.getLogger(__name__)


class ResendMailSender(IMailSender):
    """Mail sender implementation using the Resend HTTP API

    The client is expected to carry the base URL and the bearer token.
    """

    def __init__(self, client: httpx.AsyncClient, sender: str):
        self.client = client
        self.sender = sender

    async def send(self, message: ConfirmationEmail) -> Optional[str]:
        payload = {
            "from": self.sender,
            "to": [message.to],
            "subject": message.subject,
            "html": message.html,
        }
        if message.text:
            payload["text"] = message.text

        response = await self.client.post("/emails", json=payload)
        if response.is_error:
            detail = None
            try:
                detail = response.json().get("message")
            except ValueError:
                detail = response.text or None
            logger.debug(f"Resend responded {response.status_code}: {detail}")
            raise MailServiceError(response.status_code, detail)

        return response.json().get("id")
