"""Unit tests for GetBillingSummary and payment read use cases"""

import pytest
from datetime import datetime
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

from src.app.use_cases.invoicing import GetBillingSummary, GetPayment, ListPayments
from src.domain.invoice import Invoice, InvoiceStatus
from src.domain.payment import Payment


def _invoice(total, status):
    return Invoice(
        account_id="acct-1",
        job_id="job-1",
        customer_id="cust-1",
        invoice_number=f"INV-{total}",
        total_amount=Decimal(total),
        status=status,
    )


def _payment(amount):
    return Payment(
        id="pay-1",
        invoice_id="inv-1",
        customer_id="cust-1",
        account_id="acct-1",
        amount=Decimal(amount),
        payment_method="cash",
        reference_number="PAY-20240101-ABC123",
        payment_date=datetime(2024, 1, 2),
        created_at=datetime(2024, 1, 2),
    )


@pytest.fixture
def mock_invoice_repo():
    repo = MagicMock()
    repo.list_all = AsyncMock(
        return_value=[
            _invoice("140.4", InvoiceStatus.PAID),
            _invoice("59.6", InvoiceStatus.SENT),
        ]
    )
    return repo


@pytest.fixture
def mock_payment_repo():
    repo = MagicMock()
    repo.list_all = AsyncMock(return_value=[_payment("60"), _payment("80.4")])
    repo.get_by_id = AsyncMock(return_value=_payment("60"))
    repo.list = AsyncMock(return_value=[_payment("60")])
    return repo


@pytest.mark.asyncio
class TestGetBillingSummary:
    async def test_summary(self, mock_invoice_repo, mock_payment_repo):
        # Act
        result = await GetBillingSummary(mock_invoice_repo, mock_payment_repo).execute("acct-1")

        # Assert
        assert result.is_ok()
        summary = result.value
        assert summary.total_invoices == 2
        assert summary.total_invoiced == Decimal("200.0")
        assert summary.total_collected == Decimal("140.4")
        assert summary.total_outstanding == Decimal("59.6")
        assert summary.paid_invoices == 1
        assert summary.unpaid_invoices == 1
        assert summary.collection_rate == Decimal("70.2")
        assert summary.average_payment == Decimal("70.2")
        mock_invoice_repo.list_all.assert_called_once_with(account_id="acct-1")
        mock_payment_repo.list_all.assert_called_once_with(account_id="acct-1")

    async def test_summary_failure(self, mock_invoice_repo, mock_payment_repo):
        mock_invoice_repo.list_all = AsyncMock(side_effect=Exception("timeout"))

        result = await GetBillingSummary(mock_invoice_repo, mock_payment_repo).execute("acct-1")

        assert result.is_err()
        assert result.error.code.endswith("_FAILED")


@pytest.mark.asyncio
class TestPaymentReads:
    async def test_get_payment(self, mock_payment_repo):
        result = await GetPayment(mock_payment_repo).execute("pay-1")

        assert result.value.amount == Decimal("60")
        assert result.value.invoice_status is None

    async def test_get_missing_payment(self, mock_payment_repo):
        mock_payment_repo.get_by_id = AsyncMock(return_value=None)

        result = await GetPayment(mock_payment_repo).execute("missing")

        assert result.error.code == "PAYMENT_NOT_FOUND"

    async def test_list_payments(self, mock_payment_repo):
        result = await ListPayments(mock_payment_repo).execute(account_id="acct-1", limit=20, offset=0)

        assert [p.reference_number for p in result.value] == ["PAY-20240101-ABC123"]
