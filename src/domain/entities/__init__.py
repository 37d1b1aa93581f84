"""
Waitlist Domain Entities
"""

from .enums import StoreBackend
from .waitlist_signup import WaitlistSignup

__all__ = [
    # Enums
    "StoreBackend",
    # Entities
    "WaitlistSignup",
]
