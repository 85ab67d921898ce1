"""MarkOverdueInvoices Use Case

Moves sent invoices past their due date to overdue.
"""

import logging
from datetime import datetime
from typing import Optional
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.invoice_repository import InvoiceRepository
from src.domain.invoice import InvoiceStatus
from .dtos import MarkOverdueResultDTO

logger = logging.getLogger(__name__)


class MarkOverdueInvoices:
    """
    Use Case: Flag overdue invoices

    Business Rules:
    1. Only sent invoices are considered (drafts are never overdue)
    2. due_date must be strictly before the reference time
    3. Fully paid invoices are skipped even if their status lags behind
    """

    def __init__(self, uow: UnitOfWork, invoice_repo: InvoiceRepository):
        self.uow = uow
        self.invoice_repo = invoice_repo

    async def execute(self, as_of: Optional[datetime] = None) -> Result[MarkOverdueResultDTO]:
        as_of = as_of or datetime.utcnow()

        try:
            candidates = await self.invoice_repo.list_overdue_candidates(as_of)

            marked = []
            for invoice in candidates:
                if invoice.is_settled:
                    continue
                invoice.status = InvoiceStatus.OVERDUE
                await self.invoice_repo.update(invoice)
                marked.append(invoice.id)

            await self.uow.commit()

            if marked:
                logger.info(f"Marked {len(marked)} of {len(candidates)} invoices overdue")

            return Return.ok(
                MarkOverdueResultDTO(
                    checked=len(candidates),
                    marked_overdue=len(marked),
                    invoice_ids=marked,
                )
            )

        except Exception as e:
            logger.exception("Failed to mark overdue invoices")
            await self.uow.rollback()
            return Return.err(
                Error(
                    code="MARK_OVERDUE_FAILED",
                    message="Failed to mark overdue invoices",
                    reason=str(e),
                )
            )
