from typing import Optional

from pydantic import BaseModel


class SendConfirmationCommand(BaseModel):
    """Recipient of the waitlist confirmation email"""

    firstname: str
    email: str


class SendConfirmationResponse(BaseModel):
    success: bool = True
    message: str = "Email sent"
    id: Optional[str] = None
