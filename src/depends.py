from dataclasses import dataclass
from typing import Optional

from fastapi import Header, Request
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from libs.result import Error
from src.adapter.services.notification_service import create_invoice_notifier
from src.adapter.services.pdf_service import ReportLabPdfService
from src.api.error import ClientError

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)


async def get_session() -> AsyncSession:
    async with AsyncSessionLocal() as session:
        yield session


def get_config(request: Request):
    return request.app.state.config


@dataclass(frozen=True)
class Principal:
    """Caller identity, passed explicitly to every handler"""

    account_id: Optional[str]
    user_id: Optional[str] = None


async def get_principal(
    request: Request,
    x_account_id: Optional[str] = Header(default=None),
    x_user_id: Optional[str] = Header(default=None),
) -> Principal:
    config = get_config(request)
    if not x_account_id and not config.AUTH_DISABLED:
        raise ClientError(
            Error(
                code="UNAUTHENTICATED",
                message="Missing X-Account-Id header",
                reason="Requests must identify the calling account",
            )
        )
    return Principal(account_id=x_account_id, user_id=x_user_id)


def get_pdf_service(request: Request) -> ReportLabPdfService:
    config = get_config(request)
    return ReportLabPdfService(
        company_name=config.COMPANY_NAME, company_address=config.COMPANY_ADDRESS
    )


def get_invoice_notifier(request: Request):
    config = get_config(request)
    return create_invoice_notifier(
        webhook_url=config.INVOICE_NOTIFICATION_WEBHOOK, sender_name=config.COMPANY_NAME
    )


def resolve_account_id(explicit: Optional[str], principal: Principal) -> str:
    """Account from the request body/query, else the caller's account"""
    account_id = explicit or principal.account_id
    if not account_id:
        raise ClientError(
            Error(
                code="ACCOUNT_ID_REQUIRED",
                message="accountId is required",
                reason="No accountId given and no X-Account-Id header present",
            )
        )
    return account_id
