"""
Send Confirmation Use Case

Sends the transactional "you're on the waitlist" email. Runs before the
signup is persisted; a failure here means nothing was stored.
"""

import html
import logging

from libs.result import Error, Result, Return
from src.app.services.mail_sender import ConfirmationEmail, IMailSender
from src.domain.errors import MailServiceError
from .dtos import SendConfirmationCommand, SendConfirmationResponse

logger = logging.getLogger(__name__)

RATE_LIMITED = "RATE_LIMITED"
MAIL_FAILED = "MAIL_FAILED"

_HTML_BODY = """\
<p>Hi {firstname},</p>
<p>Thanks for joining the {app_name} waitlist. You're on the list and we'll
email you as soon as early access opens.</p>
<p>The {app_name} team</p>
"""

_TEXT_BODY = (
    "Hi {firstname},\n\n"
    "Thanks for joining the {app_name} waitlist. You're on the list and we'll "
    "email you as soon as early access opens.\n\n"
    "The {app_name} team\n"
)


class SendConfirmationUseCase:
    """
    Use case for sending the waitlist confirmation email.

    Business Rules:
    - One delivery attempt, no retry
    - Provider 429 maps to RATE_LIMITED
    - Any other provider failure maps to MAIL_FAILED
    """

    def __init__(self, mail_sender: IMailSender, app_name: str = "Waitlist"):
        self.mail_sender = mail_sender
        self.app_name = app_name

    def render(self, command: SendConfirmationCommand) -> ConfirmationEmail:
        firstname = command.firstname.strip()
        return ConfirmationEmail(
            to=command.email.strip(),
            subject=f"Welcome to the {self.app_name} waitlist",
            html=_HTML_BODY.format(
                firstname=html.escape(firstname), app_name=html.escape(self.app_name)
            ),
            text=_TEXT_BODY.format(firstname=firstname, app_name=self.app_name),
        )

    async def execute(
        self, command: SendConfirmationCommand
    ) -> Result[SendConfirmationResponse]:
        message = self.render(command)

        try:
            message_id = await self.mail_sender.send(message)
        except MailServiceError as exc:
            if exc.rate_limited:
                logger.warning(f"Mail service rate limited confirmation to {message.to}")
                return Return.err(Error(RATE_LIMITED, "Too many requests"))
            logger.error(f"Mail service rejected confirmation to {message.to}: {exc}")
            return Return.err(Error(MAIL_FAILED, str(exc)))
        except Exception as exc:
            logger.exception(f"Confirmation email to {message.to} failed")
            return Return.err(Error(MAIL_FAILED, str(exc) or "Failed to send email"))

        logger.info(f"Confirmation email sent to {message.to}")
        return Return.ok(SendConfirmationResponse(id=message_id))
