"""RenderInvoicePdf Use Case

Renders a printable invoice through the PDF service.
"""

import logging
from libs.result import Result, Return, Error
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.services.pdf_service import PdfService
from .dtos import InvoicePdfDTO

logger = logging.getLogger(__name__)


class RenderInvoicePdf:
    """
    Use Case: Generate an invoice PDF

    Business Rules:
    1. Invoice must exist
    2. Any status can be rendered
    """

    def __init__(self, invoice_repo: InvoiceRepository, pdf_service: PdfService):
        self.invoice_repo = invoice_repo
        self.pdf_service = pdf_service

    async def execute(self, invoice_id: str) -> Result[InvoicePdfDTO]:
        try:
            invoice = await self.invoice_repo.get_by_id(invoice_id)
            if not invoice:
                return Return.err(
                    Error(
                        code="INVOICE_NOT_FOUND",
                        message=f"Invoice with ID {invoice_id} not found",
                        reason="Invoice does not exist",
                    )
                )

            pdf_bytes = self.pdf_service.generate_invoice_pdf(invoice)

            return Return.ok(
                InvoicePdfDTO(invoice_number=invoice.invoice_number, content=pdf_bytes)
            )

        except Exception as e:
            logger.exception(f"Failed to render PDF for invoice {invoice_id}")
            return Return.err(
                Error(
                    code="RENDER_INVOICE_PDF_FAILED",
                    message="Failed to generate invoice PDF",
                    reason=str(e),
                )
            )
