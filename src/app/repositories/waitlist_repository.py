from abc import ABC, abstractmethod
from typing import Optional

from src.domain.entities import WaitlistSignup


class IWaitlistRepository(ABC):
    """Waitlist repository interface - application layer

    Implementations must enforce email uniqueness and raise
    DuplicateEmailError on conflict, StoreRateLimitedError when the
    store throttles the caller.
    """

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[WaitlistSignup]:
        """Get signup by email address"""
        pass

    @abstractmethod
    async def create(self, signup: WaitlistSignup) -> WaitlistSignup:
        """Insert a new signup"""
        pass
