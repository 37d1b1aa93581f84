from typing import Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from src.api.error import MISSING_FIELDS, ClientError, ServerError
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.waitlist import (
    JoinWaitlistCommand,
    JoinWaitlistResponse,
    JoinWaitlistUseCase,
)
from src.depends import get_unit_of_work
from src.domain.validation import is_blank

router = APIRouter()


class WaitlistRequest(BaseModel):
    """
    Waitlist signup HTTP request payload

    Fields are optional here so that a missing field yields the
    400 "Missing required fields" body rather than FastAPI's 422.
    """

    name: Optional[str] = Field(None, max_length=255, description="Registrant name")
    email: Optional[str] = Field(None, max_length=320, description="Registrant email")


@router.post("/waitlist", status_code=status.HTTP_200_OK, response_model=JoinWaitlistResponse)
@router.post("/notion", status_code=status.HTTP_200_OK, response_model=JoinWaitlistResponse)
async def join_waitlist(
    request: WaitlistRequest, uow: UnitOfWork = Depends(get_unit_of_work)
):
    """
    Join the waitlist.

    Both paths persist to the configured store backend.

    Raises:
        - 400 Bad Request: name or email missing
        - 409 Conflict: email already registered
        - 429 Too Many Requests: store rate limited the insert
        - 500 Internal Server Error: any other store failure, or missing configuration
    """
    if is_blank(request.name) or is_blank(request.email):
        raise ClientError(MISSING_FIELDS)

    command = JoinWaitlistCommand(name=request.name, email=request.email)
    use_case = JoinWaitlistUseCase(uow)
    result = await use_case.execute(command)

    if result.is_err():
        error = result.error
        if error.code == "EMAIL_ALREADY_REGISTERED":
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        elif error.code == "RATE_LIMITED":
            raise ClientError(error, status_code=status.HTTP_429_TOO_MANY_REQUESTS)
        raise ServerError(error)

    return result.value
