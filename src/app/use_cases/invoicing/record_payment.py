"""RecordPayment Use Case

Appends a payment to an invoice and applies it to the invoice balance.
"""

import logging
from datetime import datetime
from typing import Optional
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.repositories.payment_repository import PaymentRepository
from src.domain.billing import generate_payment_reference
from src.domain.payment import Payment
from .dtos import RecordPaymentCommandDTO, PaymentResponseDTO

logger = logging.getLogger(__name__)


class RecordPayment:
    """
    Use Case: Record a payment against an invoice

    Business Rules:
    1. Invoice must exist
    2. paid_amount is INCREMENTED by the payment amount (never overwritten)
    3. The invoice becomes paid once paid_amount >= total_amount
    4. Overpayment is accepted
    5. The increment is a single atomic UPDATE, so concurrent payments
       against the same invoice cannot lose updates

    Flow:
    1. Retrieve invoice
    2. Create payment row (reference generated if absent)
    3. Atomically increment paid_amount and settle if fully paid
    4. Commit transaction
    5. Return payment with the invoice's post-payment state
    """

    def __init__(
        self,
        uow: UnitOfWork,
        invoice_repo: InvoiceRepository,
        payment_repo: PaymentRepository,
        default_method: Optional[str] = None,
    ):
        self.uow = uow
        self.invoice_repo = invoice_repo
        self.payment_repo = payment_repo
        self.default_method = default_method

    async def execute(self, command: RecordPaymentCommandDTO) -> Result[PaymentResponseDTO]:
        """
        Execute payment recording

        Args:
            command: RecordPaymentCommandDTO with invoice_id, amount and optional details

        Returns:
            Result[PaymentResponseDTO]: Success with payment details or error
        """
        try:
            # Step 1: Retrieve invoice
            invoice = await self.invoice_repo.get_by_id(command.invoice_id)
            if not invoice:
                return Return.err(
                    Error(
                        code="INVOICE_NOT_FOUND",
                        message=f"Invoice with ID {command.invoice_id} not found",
                        reason="Invoice does not exist",
                    )
                )

            # Step 2: Create payment row
            now = datetime.utcnow()
            payment = Payment(
                invoice_id=invoice.id,
                customer_id=invoice.customer_id,
                account_id=invoice.account_id,
                amount=command.amount,
                payment_method=command.payment_method or self.default_method,
                reference_number=command.reference_number or generate_payment_reference(now),
                payment_date=now,
                notes=command.notes,
                created_at=now,
            )
            created_payment = await self.payment_repo.create(payment)

            # Step 3: Apply to invoice balance
            updated_invoice = await self.invoice_repo.apply_payment(
                invoice.id, command.amount, now
            )
            if updated_invoice is None:
                # Deleted by a concurrent request after Step 1
                await self.uow.rollback()
                return Return.err(
                    Error(
                        code="INVOICE_NOT_FOUND",
                        message=f"Invoice with ID {command.invoice_id} not found",
                        reason="Invoice was removed while the payment was applied",
                    )
                )

            # Step 4: Commit transaction
            await self.uow.commit()

            logger.info(
                f"Recorded payment {created_payment.reference_number} of {command.amount} "
                f"on invoice {invoice.invoice_number} "
                f"(paid {updated_invoice.paid_amount} of {updated_invoice.total_amount}, "
                f"status {updated_invoice.status.value})"
            )

            return Return.ok(PaymentResponseDTO.from_entity(created_payment, updated_invoice))

        except Exception as e:
            logger.exception(f"Failed to record payment on invoice {command.invoice_id}")
            await self.uow.rollback()
            return Return.err(
                Error(
                    code="RECORD_PAYMENT_FAILED",
                    message="Failed to record payment",
                    reason=str(e),
                )
            )
