"""
Domain exceptions raised by adapters at the storage and mail boundaries.

Use cases catch these and convert them to Result errors; they never reach
the API layer.
"""

from typing import Optional


class DuplicateEmailError(Exception):
    """The store rejected an insert because the email is already registered."""

    def __init__(self, email: Optional[str] = None):
        self.email = email
        super().__init__(f"Email already registered: {email}" if email else "Email already registered")


class StoreRateLimitedError(Exception):
    """The store signalled that the caller is being rate limited."""


class MailServiceError(Exception):
    """The transactional mail service answered with a non-success status."""

    def __init__(self, status_code: int, message: Optional[str] = None):
        self.status_code = status_code
        super().__init__(message or f"Mail service responded with {status_code}")

    @property
    def rate_limited(self) -> bool:
        return self.status_code == 429
