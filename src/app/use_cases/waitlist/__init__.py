"""
Waitlist Use Cases
"""

from .join_waitlist_use_case import JoinWaitlistUseCase
from .dtos import JoinWaitlistCommand, JoinWaitlistResponse

__all__ = [
    "JoinWaitlistUseCase",
    "JoinWaitlistCommand",
    "JoinWaitlistResponse",
]
