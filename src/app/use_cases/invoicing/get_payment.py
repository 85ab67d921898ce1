"""GetPayment and ListPayments Use Cases"""

import logging
from typing import List, Optional
from libs.result import Result, Return, Error
from src.app.repositories.payment_repository import PaymentRepository
from .dtos import PaymentResponseDTO

logger = logging.getLogger(__name__)


class GetPayment:
    """Use Case: Retrieve a single payment"""

    def __init__(self, payment_repo: PaymentRepository):
        self.payment_repo = payment_repo

    async def execute(self, payment_id: str) -> Result[PaymentResponseDTO]:
        try:
            payment = await self.payment_repo.get_by_id(payment_id)
        except Exception as e:
            logger.exception(f"Failed to fetch payment {payment_id}")
            return Return.err(
                Error(code="GET_PAYMENT_FAILED", message="Error fetching payment", reason=str(e))
            )

        if not payment:
            return Return.err(
                Error(
                    code="PAYMENT_NOT_FOUND",
                    message=f"Payment with ID {payment_id} not found",
                    reason="Payment does not exist",
                )
            )

        return Return.ok(PaymentResponseDTO.from_entity(payment))


class ListPayments:
    """
    Use Case: List payments

    Ordered by payment_date DESC, paginated by limit/offset.
    """

    def __init__(self, payment_repo: PaymentRepository):
        self.payment_repo = payment_repo

    async def execute(
        self, account_id: Optional[str] = None, limit: int = 50, offset: int = 0
    ) -> Result[List[PaymentResponseDTO]]:
        try:
            payments = await self.payment_repo.list(
                account_id=account_id, limit=limit, offset=offset
            )
        except Exception as e:
            logger.exception("Failed to list payments")
            return Return.err(
                Error(code="LIST_PAYMENTS_FAILED", message="Error fetching payments", reason=str(e))
            )

        return Return.ok([PaymentResponseDTO.from_entity(p) for p in payments])
