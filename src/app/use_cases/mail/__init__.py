"""
Mail Use Cases
"""

from .send_confirmation_use_case import SendConfirmationUseCase
from .dtos import SendConfirmationCommand, SendConfirmationResponse

__all__ = [
    "SendConfirmationUseCase",
    "SendConfirmationCommand",
    "SendConfirmationResponse",
]
