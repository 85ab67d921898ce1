"""Unit tests for MarkOverdueInvoices use case"""

import pytest
from datetime import datetime
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

from src.app.use_cases.invoicing import MarkOverdueInvoices
from src.domain.invoice import Invoice, InvoiceStatus


def _sent_invoice(invoice_id, total, paid):
    return Invoice(
        id=invoice_id,
        account_id="acct-1",
        job_id="job-1",
        customer_id="cust-1",
        invoice_number=f"INV-{invoice_id}",
        total_amount=Decimal(total),
        paid_amount=Decimal(paid),
        status=InvoiceStatus.SENT,
        due_date=datetime(2024, 1, 31),
    )


@pytest.fixture
def mock_invoice_repo():
    repo = MagicMock()
    repo.list_overdue_candidates = AsyncMock(
        return_value=[
            _sent_invoice("inv-1", "100", "0"),
            _sent_invoice("inv-2", "100", "100"),
        ]
    )
    repo.update = AsyncMock(side_effect=lambda invoice: invoice)
    return repo


@pytest.mark.asyncio
class TestMarkOverdueInvoices:
    async def test_marks_unsettled_invoices_only(self, mock_uow, mock_invoice_repo):
        """
        Given: Two sent invoices past due, one already fully paid
        When: execute is called
        Then: Only the unpaid invoice is marked overdue
        """
        # Arrange
        as_of = datetime(2024, 2, 15)

        # Act
        result = await MarkOverdueInvoices(mock_uow, mock_invoice_repo).execute(as_of=as_of)

        # Assert
        assert result.is_ok()
        assert result.value.checked == 2
        assert result.value.marked_overdue == 1
        assert result.value.invoice_ids == ["inv-1"]
        mock_invoice_repo.list_overdue_candidates.assert_called_once_with(as_of)
        assert mock_invoice_repo.update.call_count == 1
        assert mock_invoice_repo.update.call_args.args[0].status == InvoiceStatus.OVERDUE
        mock_uow.commit.assert_called_once()

    async def test_no_candidates(self, mock_uow, mock_invoice_repo):
        mock_invoice_repo.list_overdue_candidates = AsyncMock(return_value=[])

        result = await MarkOverdueInvoices(mock_uow, mock_invoice_repo).execute()

        assert result.value.checked == 0
        assert result.value.marked_overdue == 0
        mock_invoice_repo.update.assert_not_called()

    async def test_failure_rolls_back(self, mock_uow, mock_invoice_repo):
        mock_invoice_repo.update = AsyncMock(side_effect=Exception("deadlock"))

        result = await MarkOverdueInvoices(mock_uow, mock_invoice_repo).execute()

        assert result.is_err()
        assert result.error.code == "MARK_OVERDUE_FAILED"
        mock_uow.rollback.assert_called_once()
