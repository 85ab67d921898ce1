"""GetInvoice and ListInvoices Use Cases"""

import logging
from typing import List, Optional
from libs.result import Result, Return, Error
from src.app.repositories.invoice_repository import InvoiceRepository
from src.domain.invoice import InvoiceStatus
from .dtos import InvoiceResponseDTO

logger = logging.getLogger(__name__)


class GetInvoice:
    """Use Case: Retrieve a single invoice"""

    def __init__(self, invoice_repo: InvoiceRepository):
        self.invoice_repo = invoice_repo

    async def execute(self, invoice_id: str) -> Result[InvoiceResponseDTO]:
        try:
            invoice = await self.invoice_repo.get_by_id(invoice_id)
        except Exception as e:
            logger.exception(f"Failed to fetch invoice {invoice_id}")
            return Return.err(
                Error(code="GET_INVOICE_FAILED", message="Error fetching invoice", reason=str(e))
            )

        if not invoice:
            return Return.err(
                Error(
                    code="INVOICE_NOT_FOUND",
                    message=f"Invoice with ID {invoice_id} not found",
                    reason="Invoice does not exist",
                )
            )

        return Return.ok(InvoiceResponseDTO.from_entity(invoice))


class ListInvoices:
    """
    Use Case: List invoices

    Ordered by invoice_date DESC (most recent first), paginated by limit/offset.
    """

    def __init__(self, invoice_repo: InvoiceRepository):
        self.invoice_repo = invoice_repo

    async def execute(
        self,
        account_id: Optional[str] = None,
        status: Optional[InvoiceStatus] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> Result[List[InvoiceResponseDTO]]:
        try:
            invoices = await self.invoice_repo.list(
                account_id=account_id,
                status=status,
                limit=limit,
                offset=offset,
            )
        except Exception as e:
            logger.exception("Failed to list invoices")
            return Return.err(
                Error(code="LIST_INVOICES_FAILED", message="Error fetching invoices", reason=str(e))
            )

        return Return.ok([InvoiceResponseDTO.from_entity(i) for i in invoices])
