"""GetBillingSummary Use Case

Aggregates invoicing and collection totals.
"""

import logging
from typing import Optional
from libs.result import Result, Return, Error
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.repositories.payment_repository import PaymentRepository
from src.domain.billing import summarize_billing
from .dtos import BillingSummaryDTO

logger = logging.getLogger(__name__)


class GetBillingSummary:
    """
    Use Case: Financial summary across invoices and payments

    Optionally scoped to one account.
    """

    def __init__(self, invoice_repo: InvoiceRepository, payment_repo: PaymentRepository):
        self.invoice_repo = invoice_repo
        self.payment_repo = payment_repo

    async def execute(self, account_id: Optional[str] = None) -> Result[BillingSummaryDTO]:
        try:
            invoices = await self.invoice_repo.list_all(account_id=account_id)
            payments = await self.payment_repo.list_all(account_id=account_id)
        except Exception as e:
            logger.exception("Failed to fetch billing summary")
            return Return.err(
                Error(code="BILLING_SUMMARY_FAILED", message="Error fetching summary", reason=str(e))
            )

        summary = summarize_billing(invoices, payments)

        return Return.ok(
            BillingSummaryDTO(
                total_invoices=summary.total_invoices,
                total_invoiced=summary.total_invoiced,
                total_collected=summary.total_collected,
                total_outstanding=summary.total_outstanding,
                paid_invoices=summary.paid_invoices,
                unpaid_invoices=summary.unpaid_invoices,
                collection_rate=summary.collection_rate,
                total_payments=summary.total_payments,
                average_payment=summary.average_payment,
            )
        )
