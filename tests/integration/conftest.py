from typing import List, Optional

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel, func, select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.services.mail_sender import ConfirmationEmail, IMailSender
from src.depends import get_mail_sender, get_unit_of_work
from src.domain.entities import WaitlistSignup
from src.domain.errors import MailServiceError
from tests.fixtures.json_loader import TestDataLoader


class FakeMailSender(IMailSender):
    """Records every email; fails with fail_status when set"""

    def __init__(self):
        self.sent: List[ConfirmationEmail] = []
        self.fail_status: Optional[int] = None

    async def send(self, message: ConfirmationEmail) -> Optional[str]:
        if self.fail_status is not None:
            raise MailServiceError(self.fail_status, "provider failure")
        self.sent.append(message)
        return f"msg_{len(self.sent)}"


@pytest_asyncio.fixture
def test_data():
    return TestDataLoader()


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite:///./test.db")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(engine):
    return sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
def mail_sender():
    return FakeMailSender()


@pytest_asyncio.fixture
async def count_signups(session_factory):
    async def count(email: Optional[str] = None) -> int:
        async with session_factory() as session:
            stmt = select(func.count()).select_from(WaitlistSignup)
            if email is not None:
                stmt = stmt.where(WaitlistSignup.email == email)
            result = await session.exec(stmt)
            return result.one()

    return count


@pytest_asyncio.fixture
async def app(session_factory, mail_sender):
    from src.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        async with session_factory() as session:
            yield SqlAlchemyUnitOfWork(session)

    async def override_get_mail_sender():
        yield mail_sender

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_mail_sender] = override_get_mail_sender
    return app


@pytest_asyncio.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
