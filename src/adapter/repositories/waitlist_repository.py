from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.waitlist_repository import IWaitlistRepository
from src.domain.entities import WaitlistSignup
from src.domain.errors import DuplicateEmailError


class WaitlistRepository(IWaitlistRepository):
    """Waitlist repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_email(self, email: str) -> Optional[WaitlistSignup]:
        """Get signup by email address"""
        stmt = select(WaitlistSignup).where(WaitlistSignup.email == email)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, signup: WaitlistSignup) -> WaitlistSignup:
        """Insert a new signup; the unique index on email rejects duplicates"""
        self.session.add(signup)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise DuplicateEmailError(signup.email) from exc
        # No refresh: SQLite would hand created_at back without its UTC offset
        return signup
