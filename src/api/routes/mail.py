from typing import Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from src.api.error import MISSING_FIELDS, ClientError, ServerError
from src.app.use_cases.mail import (
    SendConfirmationCommand,
    SendConfirmationResponse,
    SendConfirmationUseCase,
)
from src.depends import get_send_confirmation_use_case
from src.domain.validation import is_blank

router = APIRouter()


class MailRequest(BaseModel):
    """
    Confirmation email HTTP request payload

    Fields are optional here so that a missing field yields the
    400 "Missing required fields" body rather than FastAPI's 422.
    """

    firstname: Optional[str] = Field(None, description="Recipient first name")
    email: Optional[str] = Field(None, description="Recipient email address")


@router.post("/mail", status_code=status.HTTP_200_OK, response_model=SendConfirmationResponse)
async def send_mail(
    request: MailRequest,
    use_case: SendConfirmationUseCase = Depends(get_send_confirmation_use_case),
):
    """
    Send the waitlist confirmation email.

    Raises:
        - 400 Bad Request: firstname or email missing
        - 429 Too Many Requests: mail provider rate limited the send
        - 500 Internal Server Error: provider failure or missing configuration
    """
    if is_blank(request.firstname) or is_blank(request.email):
        raise ClientError(MISSING_FIELDS)

    command = SendConfirmationCommand(firstname=request.firstname, email=request.email)
    result = await use_case.execute(command)

    if result.is_err():
        error = result.error
        if error.code == "RATE_LIMITED":
            raise ClientError(error, status_code=status.HTTP_429_TOO_MANY_REQUESTS)
        raise ServerError(error)

    return result.value
