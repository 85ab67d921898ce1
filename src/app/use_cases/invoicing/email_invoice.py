"""EmailInvoice Use Case

Delivers an invoice notice to the customer and marks the invoice sent.
"""

import logging
from datetime import datetime
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.notification_service import InvoiceNotifier, InvoiceDeliveryError
from src.app.repositories.invoice_repository import InvoiceRepository
from src.domain.invoice import InvoiceStatus
from src.app.use_cases.dto_base import MessageResponseDTO
from .dtos import EmailInvoiceCommandDTO

logger = logging.getLogger(__name__)


class EmailInvoice:
    """
    Use Case: E-mail an invoice to the customer

    Business Rules:
    1. Invoice must exist
    2. Recipient e-mail must be non-empty
    3. On successful delivery status = sent and sent_date = now
    4. On delivery failure the invoice is left untouched
    """

    def __init__(
        self,
        uow: UnitOfWork,
        invoice_repo: InvoiceRepository,
        notifier: InvoiceNotifier,
    ):
        self.uow = uow
        self.invoice_repo = invoice_repo
        self.notifier = notifier

    async def execute(self, command: EmailInvoiceCommandDTO) -> Result[MessageResponseDTO]:
        if not command.recipient_email.strip():
            return Return.err(
                Error(
                    code="VALIDATION_ERROR",
                    message="Customer email not found",
                    reason="recipient_email is empty",
                )
            )

        try:
            invoice = await self.invoice_repo.get_by_id(command.invoice_id)
            if not invoice:
                return Return.err(
                    Error(
                        code="INVOICE_NOT_FOUND",
                        message=f"Invoice with ID {command.invoice_id} not found",
                        reason="Invoice does not exist",
                    )
                )

            try:
                await self.notifier.send_invoice(
                    recipient_email=command.recipient_email,
                    recipient_name=command.recipient_name,
                    invoice_number=invoice.invoice_number,
                    total_amount=invoice.total_amount,
                )
            except InvoiceDeliveryError as e:
                return Return.err(
                    Error(
                        code="INVOICE_DELIVERY_FAILED",
                        message="Failed to send email",
                        reason=str(e),
                    )
                )

            invoice.status = InvoiceStatus.SENT
            invoice.sent_date = datetime.utcnow()
            await self.invoice_repo.update(invoice)
            await self.uow.commit()

            return Return.ok(MessageResponseDTO(message="Invoice sent successfully"))

        except Exception as e:
            logger.exception(f"Failed to e-mail invoice {command.invoice_id}")
            await self.uow.rollback()
            return Return.err(
                Error(code="EMAIL_INVOICE_FAILED", message="Failed to send email", reason=str(e))
            )
