"""
WaitlistSignup Entity

One registrant on the waitlist, keyed by email.
"""

from datetime import UTC, datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel


class WaitlistSignup(SQLModel, table=True):
    """
    WaitlistSignup entity - a name/email pair requesting early access.

    Business Rules:
    - Email is the natural key and must be unique for the lifetime of the store
    - Uniqueness is enforced by the store (unique index), not by application code
    - created_at is assigned server-side at insert time
    """

    __tablename__ = "waitlist"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=255)
    email: str = Field(unique=True, index=True, max_length=320)

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(DateTime(timezone=True), nullable=False),
    )
