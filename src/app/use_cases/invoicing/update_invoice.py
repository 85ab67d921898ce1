"""UpdateInvoice Use Case

Applies a partial update to an invoice and recomputes its amounts.
"""

import logging
from datetime import datetime
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.invoice_repository import InvoiceRepository
from .dtos import UpdateInvoiceCommandDTO, InvoiceResponseDTO

logger = logging.getLogger(__name__)


class UpdateInvoice:
    """
    Use Case: Partially update an invoice

    Business Rules:
    1. Any subset of {status, labor_hours, material_cost} may change
    2. Amounts are ALWAYS recomputed from the stored hourly_rate and tax_rate,
       even for a status-only or empty update
    3. Recomputing unchanged inputs reproduces the same amounts exactly
    4. Without an explicit status, the settle rule is re-applied to the new
       total: paid once paid_amount >= total_amount, back to sent otherwise
    """

    def __init__(self, uow: UnitOfWork, invoice_repo: InvoiceRepository):
        self.uow = uow
        self.invoice_repo = invoice_repo

    async def execute(self, command: UpdateInvoiceCommandDTO) -> Result[InvoiceResponseDTO]:
        try:
            invoice = await self.invoice_repo.get_by_id(command.invoice_id, for_update=True)
            if not invoice:
                return Return.err(
                    Error(
                        code="INVOICE_NOT_FOUND",
                        message=f"Invoice with ID {command.invoice_id} not found",
                        reason="Invoice does not exist",
                    )
                )

            if command.status is not None:
                invoice.status = command.status
            if command.labor_hours is not None:
                invoice.labor_hours = command.labor_hours
            if command.material_cost is not None:
                invoice.material_cost = command.material_cost

            invoice.recalculate()
            if command.status is None:
                invoice.sync_payment_status(datetime.utcnow())

            updated_invoice = await self.invoice_repo.update(invoice)
            await self.uow.commit()

            return Return.ok(InvoiceResponseDTO.from_entity(updated_invoice))

        except Exception as e:
            logger.exception(f"Failed to update invoice {command.invoice_id}")
            await self.uow.rollback()
            return Return.err(
                Error(
                    code="UPDATE_INVOICE_FAILED",
                    message="Failed to update invoice",
                    reason=str(e),
                )
            )
