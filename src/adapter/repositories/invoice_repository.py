"""SQLAlchemy Invoice Repository Implementation

Implements invoice persistence using SQLAlchemy async session.
"""

import logging
from typing import Optional, List
from datetime import datetime
from decimal import Decimal
from sqlalchemy import update
from sqlalchemy.exc import IntegrityError
from sqlmodel import select, func
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.invoice_repository import InvoiceRepository, InvoiceNumberTaken
from src.domain.invoice import Invoice, InvoiceStatus

logger = logging.getLogger(__name__)


class SqlAlchemyInvoiceRepository(InvoiceRepository):
    """
    SQLAlchemy implementation of InvoiceRepository

    Features:
    - Optional row locking via SELECT FOR UPDATE (ignored by SQLite)
    - Atomic paid_amount increments for payment application
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, invoice: Invoice) -> Invoice:
        self.session.add(invoice)
        try:
            await self.session.flush()
        except IntegrityError as e:
            # id is a fresh UUID, so the unique invoice_number is what collided
            logger.warning(f"Invoice number collision on {invoice.invoice_number}")
            raise InvoiceNumberTaken(invoice.invoice_number) from e
        await self.session.refresh(invoice)
        return invoice

    async def get_by_id(self, invoice_id: str, for_update: bool = False) -> Optional[Invoice]:
        statement = select(Invoice).where(Invoice.id == invoice_id)

        if for_update:
            statement = statement.with_for_update()

        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def list(
        self,
        account_id: Optional[str] = None,
        status: Optional[InvoiceStatus] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> List[Invoice]:
        statement = select(Invoice)

        if account_id:
            statement = statement.where(Invoice.account_id == account_id)

        if status:
            statement = statement.where(Invoice.status == status)

        statement = statement.order_by(Invoice.invoice_date.desc())
        statement = statement.limit(limit).offset(offset)

        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def list_all(self, account_id: Optional[str] = None) -> List[Invoice]:
        statement = select(Invoice)

        if account_id:
            statement = statement.where(Invoice.account_id == account_id)

        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def get_first_for_job(self, job_id: str) -> Optional[Invoice]:
        statement = (
            select(Invoice)
            .where(Invoice.job_id == job_id)
            .order_by(Invoice.created_at.asc())
            .limit(1)
        )
        result = await self.session.execute(statement)
        return result.scalars().first()

    async def list_overdue_candidates(self, as_of: datetime) -> List[Invoice]:
        statement = (
            select(Invoice)
            .where(Invoice.status == InvoiceStatus.SENT)
            .where(Invoice.due_date < as_of)
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def update(self, invoice: Invoice) -> Invoice:
        invoice.updated_at = datetime.utcnow()
        self.session.add(invoice)
        await self.session.flush()
        await self.session.refresh(invoice)
        return invoice

    async def apply_payment(
        self, invoice_id: str, amount: Decimal, paid_at: datetime
    ) -> Optional[Invoice]:
        """
        Atomically add a payment amount to an invoice

        Both statements run server-side, so concurrent payments against the
        same invoice never read a stale paid_amount.
        """
        increment = (
            update(Invoice)
            .where(Invoice.id == invoice_id)
            .values(paid_amount=Invoice.paid_amount + amount, updated_at=paid_at)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(increment)
        if result.rowcount == 0:
            return None

        settle = (
            update(Invoice)
            .where(Invoice.id == invoice_id)
            .where(Invoice.status != InvoiceStatus.PAID)
            .where(Invoice.paid_amount >= Invoice.total_amount)
            .values(status=InvoiceStatus.PAID, payment_date=paid_at)
            .execution_options(synchronize_session=False)
        )
        await self.session.execute(settle)

        statement = (
            select(Invoice)
            .where(Invoice.id == invoice_id)
            .execution_options(populate_existing=True)
        )
        refreshed = await self.session.execute(statement)
        return refreshed.scalar_one_or_none()

    async def delete(self, invoice: Invoice) -> None:
        await self.session.delete(invoice)
        await self.session.flush()

    async def generate_invoice_number(self) -> str:
        year = datetime.utcnow().year
        prefix = f"INV-{year}-"

        # Get the highest invoice number for this year
        statement = (
            select(func.max(Invoice.invoice_number))
            .where(Invoice.invoice_number.like(f"{prefix}%"))
        )
        result = await self.session.execute(statement)
        max_number = result.scalar_one_or_none()

        if max_number:
            # Extract the sequence number and increment
            sequence = int(max_number.split("-")[-1]) + 1
        else:
            sequence = 1

        return f"{prefix}{sequence:06d}"
