"""SendInvoice Use Case

Marks an invoice as sent. Amounts are untouched.
"""

import logging
from datetime import datetime
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.invoice_repository import InvoiceRepository
from src.domain.invoice import InvoiceStatus
from .dtos import InvoiceResponseDTO

logger = logging.getLogger(__name__)


class SendInvoice:
    """
    Use Case: Transition an invoice to sent

    Business Rules:
    1. status = sent, sent_date = now
    2. No amount field changes
    """

    def __init__(self, uow: UnitOfWork, invoice_repo: InvoiceRepository):
        self.uow = uow
        self.invoice_repo = invoice_repo

    async def execute(self, invoice_id: str) -> Result[InvoiceResponseDTO]:
        try:
            invoice = await self.invoice_repo.get_by_id(invoice_id, for_update=True)
            if not invoice:
                return Return.err(
                    Error(
                        code="INVOICE_NOT_FOUND",
                        message=f"Invoice with ID {invoice_id} not found",
                        reason="Invoice does not exist",
                    )
                )

            invoice.status = InvoiceStatus.SENT
            invoice.sent_date = datetime.utcnow()

            updated_invoice = await self.invoice_repo.update(invoice)
            await self.uow.commit()

            logger.info(f"Invoice {updated_invoice.invoice_number} marked as sent")
            return Return.ok(InvoiceResponseDTO.from_entity(updated_invoice))

        except Exception as e:
            logger.exception(f"Failed to send invoice {invoice_id}")
            await self.uow.rollback()
            return Return.err(
                Error(code="SEND_INVOICE_FAILED", message="Failed to send invoice", reason=str(e))
            )
