"""
Use Cases

- mail/: confirmation email delivery
- waitlist/: signup persistence
"""

from .mail import (
    SendConfirmationUseCase,
    SendConfirmationCommand,
    SendConfirmationResponse,
)
from .waitlist import (
    JoinWaitlistUseCase,
    JoinWaitlistCommand,
    JoinWaitlistResponse,
)

__all__ = [
    # Mail
    "SendConfirmationUseCase",
    "SendConfirmationCommand",
    "SendConfirmationResponse",
    # Waitlist
    "JoinWaitlistUseCase",
    "JoinWaitlistCommand",
    "JoinWaitlistResponse",
]
