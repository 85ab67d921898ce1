"""SQLAlchemy Payment Repository Implementation"""

from typing import Optional, List
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.payment_repository import PaymentRepository
from src.domain.payment import Payment


class SqlAlchemyPaymentRepository(PaymentRepository):
    """SQLAlchemy implementation of PaymentRepository"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, payment: Payment) -> Payment:
        self.session.add(payment)
        await self.session.flush()
        await self.session.refresh(payment)
        return payment

    async def get_by_id(self, payment_id: str) -> Optional[Payment]:
        statement = select(Payment).where(Payment.id == payment_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def list(
        self,
        account_id: Optional[str] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> List[Payment]:
        statement = select(Payment)

        if account_id:
            statement = statement.where(Payment.account_id == account_id)

        statement = statement.order_by(Payment.payment_date.desc())
        statement = statement.limit(limit).offset(offset)

        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def list_all(self, account_id: Optional[str] = None) -> List[Payment]:
        statement = select(Payment)

        if account_id:
            statement = statement.where(Payment.account_id == account_id)

        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def list_by_invoice(self, invoice_id: str) -> List[Payment]:
        statement = (
            select(Payment)
            .where(Payment.invoice_id == invoice_id)
            .order_by(Payment.payment_date.asc())
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())
