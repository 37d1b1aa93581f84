import logging

import httpx
from fastapi import Depends
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.adapter.services.resend_mail_sender import ResendMailSender
from src.adapter.services.unit_of_work import NotionUnitOfWork, SqlAlchemyUnitOfWork
from src.api.error import CONFIGURATION_ERROR, ServerError
from src.app.services.mail_sender import IMailSender
from src.app.use_cases.mail import SendConfirmationUseCase
from src.domain.entities import StoreBackend

logger = logging.getLogger(__name__)

engine = (
    create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)
    if ApplicationConfig.DB_URI
    else None
)

AsyncSessionLocal = (
    sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)
    if engine is not None
    else None
)


async def init_db():
    """Create the waitlist table if it does not exist yet."""
    if engine is None:
        return
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)


def _configuration_error(missing: str) -> ServerError:
    logger.error(f"Missing required configuration: {missing}")
    return ServerError(CONFIGURATION_ERROR)


async def get_unit_of_work():
    """Unit of work for the configured store backend (STORE_BACKEND)."""
    if ApplicationConfig.STORE_BACKEND == StoreBackend.notion.value:
        if not ApplicationConfig.NOTION_API_KEY or not ApplicationConfig.NOTION_DATABASE_ID:
            raise _configuration_error("NOTION_API_KEY / NOTION_DATABASE_ID")
        async with httpx.AsyncClient(
            base_url=ApplicationConfig.NOTION_API_BASE,
            headers={
                "Authorization": f"Bearer {ApplicationConfig.NOTION_API_KEY}",
                "Notion-Version": ApplicationConfig.NOTION_API_VERSION,
            },
            timeout=ApplicationConfig.HTTP_TIMEOUT,
        ) as client:
            yield NotionUnitOfWork(client, ApplicationConfig.NOTION_DATABASE_ID)
        return

    if AsyncSessionLocal is None:
        raise _configuration_error("DB_URI")
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


async def get_mail_sender():
    if not ApplicationConfig.RESEND_API_KEY or not ApplicationConfig.MAIL_FROM:
        raise _configuration_error("RESEND_API_KEY / MAIL_FROM")
    async with httpx.AsyncClient(
        base_url=ApplicationConfig.RESEND_API_BASE,
        headers={"Authorization": f"Bearer {ApplicationConfig.RESEND_API_KEY}"},
        timeout=ApplicationConfig.HTTP_TIMEOUT,
    ) as client:
        yield ResendMailSender(client, ApplicationConfig.MAIL_FROM)


def get_send_confirmation_use_case(
    mail_sender: IMailSender = Depends(get_mail_sender),
) -> SendConfirmationUseCase:
    return SendConfirmationUseCase(mail_sender, app_name=ApplicationConfig.APP_NAME)
