"""
Client-side DTOs exchanged with the waitlist service.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict


class SignupRequest(BaseModel):
    """
    Signup request - built from form state at submission time.

    Frozen: the same values are sent to the mail and persistence endpoints.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    email: str


class SignupRecord(BaseModel):
    """Record created by the service on a successful insert"""

    id: Optional[str] = None
    name: str
    email: str
    created_at: datetime
