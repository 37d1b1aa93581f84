"""
Waitlist Use Case DTOs (Data Transfer Objects)

Command/Response pattern for clean architecture separation:
- JoinWaitlistCommand: Input to use case (validated business intent)
- JoinWaitlistResponse: Output from use case (structured result)
"""

from datetime import datetime

from pydantic import BaseModel


class JoinWaitlistCommand(BaseModel):
    """
    Join waitlist command - represents a validated signup intent

    Created by API layer after the required-fields check passes.
    """

    name: str
    email: str


class JoinWaitlistResponse(BaseModel):
    """Created waitlist record as returned to the API layer"""

    success: bool = True
    message: str = "Successfully added to waitlist"
    id: str
    name: str
    email: str
    created_at: datetime
