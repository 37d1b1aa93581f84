import httpx
from sqlalchemy.exc import IntegrityError
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.notion_waitlist_repository import NotionWaitlistRepository
from src.adapter.repositories.waitlist_repository import WaitlistRepository
from src.app.services.unit_of_work import UnitOfWork
from src.domain.errors import DuplicateEmailError


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        self.signups = WaitlistRepository(self.session)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        try:
            await self.session.commit()
        except IntegrityError as exc:
            await self.session.rollback()
            raise DuplicateEmailError() from exc

    async def rollback(self):
        await self.session.rollback()


class NotionUnitOfWork(UnitOfWork):
    """Notion implementation of UnitOfWork; every API write is immediately durable"""

    def __init__(self, client: httpx.AsyncClient, database_id: str):
        self.client = client
        self.database_id = database_id

    async def __aenter__(self):
        self.signups = NotionWaitlistRepository(self.client, self.database_id)
        return self

    async def __aexit__(self, *args):
        pass

    async def commit(self):
        pass

    async def rollback(self):
        pass
