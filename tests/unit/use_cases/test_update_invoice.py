"""Unit tests for UpdateInvoice use case"""

import pytest
from datetime import datetime
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

from src.app.use_cases.invoicing.update_invoice import UpdateInvoice
from src.app.use_cases.invoicing.dtos import UpdateInvoiceCommandDTO
from src.domain.invoice import Invoice, InvoiceStatus


@pytest.fixture
def stored_invoice():
    invoice = Invoice(
        id="inv-1",
        account_id="acct-1",
        job_id="job-1",
        customer_id="cust-1",
        invoice_number="INV-2024-000001",
        labor_hours=Decimal("2.000000"),
        hourly_rate=Decimal("50.000000"),
        material_cost=Decimal("30.000000"),
        tax_rate=Decimal("0.080000"),
        paid_amount=Decimal("0"),
        status=InvoiceStatus.DRAFT,
        invoice_date=datetime(2024, 1, 1),
        created_at=datetime(2024, 1, 1),
        updated_at=datetime(2024, 1, 1),
    )
    invoice.recalculate()
    return invoice


@pytest.fixture
def mock_invoice_repo(stored_invoice):
    repo = MagicMock()
    repo.get_by_id = AsyncMock(return_value=stored_invoice)

    async def echo(invoice):
        return invoice

    repo.update = AsyncMock(side_effect=echo)
    return repo


@pytest.fixture
def update_invoice_use_case(mock_uow, mock_invoice_repo):
    return UpdateInvoice(uow=mock_uow, invoice_repo=mock_invoice_repo)


@pytest.mark.asyncio
class TestUpdateInvoice:
    async def test_labor_hours_change_recalculates_totals(
        self, update_invoice_use_case, mock_uow
    ):
        """
        Given: Invoice for 2h at 50 + 30 materials
        When: labor_hours is changed to 3
        Then: labor 150, subtotal 180, tax 14.4, total 194.4
        """
        # Act
        result = await update_invoice_use_case.execute(
            UpdateInvoiceCommandDTO(invoice_id="inv-1", labor_hours=Decimal("3"))
        )

        # Assert
        assert result.is_ok()
        invoice = result.value
        assert invoice.labor_amount == Decimal("150")
        assert invoice.subtotal == Decimal("180")
        assert invoice.tax_amount == Decimal("14.4")
        assert invoice.total_amount == Decimal("194.4")
        assert invoice.subtotal == invoice.labor_amount + invoice.material_cost
        assert invoice.total_amount == invoice.subtotal + invoice.tax_amount
        mock_uow.commit.assert_called_once()

    async def test_empty_update_leaves_amounts_identical(
        self, update_invoice_use_case, stored_invoice
    ):
        # Arrange
        before = (
            stored_invoice.labor_amount,
            stored_invoice.subtotal,
            stored_invoice.tax_amount,
            stored_invoice.total_amount,
        )

        # Act
        result = await update_invoice_use_case.execute(UpdateInvoiceCommandDTO(invoice_id="inv-1"))

        # Assert
        assert result.is_ok()
        after = (
            result.value.labor_amount,
            result.value.subtotal,
            result.value.tax_amount,
            result.value.total_amount,
        )
        assert [str(v) for v in after] == [str(v) for v in before]

    async def test_status_only_update(self, update_invoice_use_case):
        result = await update_invoice_use_case.execute(
            UpdateInvoiceCommandDTO(invoice_id="inv-1", status=InvoiceStatus.SENT)
        )

        assert result.value.status == InvoiceStatus.SENT
        assert result.value.total_amount == Decimal("140.4")

    async def test_material_cost_change(self, update_invoice_use_case):
        result = await update_invoice_use_case.execute(
            UpdateInvoiceCommandDTO(invoice_id="inv-1", material_cost=Decimal("70"))
        )

        assert result.value.subtotal == Decimal("170")
        assert result.value.total_amount == Decimal("183.6")

    async def test_reads_invoice_for_update(self, update_invoice_use_case, mock_invoice_repo):
        await update_invoice_use_case.execute(UpdateInvoiceCommandDTO(invoice_id="inv-1"))

        mock_invoice_repo.get_by_id.assert_called_once_with("inv-1", for_update=True)

    async def test_unknown_invoice_returns_not_found(
        self, update_invoice_use_case, mock_invoice_repo, mock_uow
    ):
        mock_invoice_repo.get_by_id = AsyncMock(return_value=None)

        result = await update_invoice_use_case.execute(UpdateInvoiceCommandDTO(invoice_id="missing"))

        assert result.is_err()
        assert result.error.code == "INVOICE_NOT_FOUND"
        mock_uow.commit.assert_not_called()

    async def test_lowering_total_to_paid_amount_settles_invoice(
        self, update_invoice_use_case, stored_invoice
    ):
        """
        Given: Sent invoice for 140.4 with 108 already paid
        When: material_cost drops to 0 (total 108)
        Then: The invoice is paid
        """
        # Arrange
        stored_invoice.status = InvoiceStatus.SENT
        stored_invoice.paid_amount = Decimal("108")

        # Act
        result = await update_invoice_use_case.execute(
            UpdateInvoiceCommandDTO(invoice_id="inv-1", material_cost=Decimal("0"))
        )

        # Assert
        assert result.value.total_amount == Decimal("108")
        assert result.value.status == InvoiceStatus.PAID
        assert result.value.payment_date is not None

    async def test_raising_total_above_paid_amount_reopens_invoice(
        self, update_invoice_use_case, stored_invoice
    ):
        # Arrange
        stored_invoice.status = InvoiceStatus.PAID
        stored_invoice.paid_amount = Decimal("140.4")
        stored_invoice.payment_date = datetime(2024, 1, 10)

        # Act
        result = await update_invoice_use_case.execute(
            UpdateInvoiceCommandDTO(invoice_id="inv-1", labor_hours=Decimal("3"))
        )

        # Assert
        assert result.value.status == InvoiceStatus.SENT
        assert result.value.payment_date is None

    async def test_explicit_status_is_kept(self, update_invoice_use_case, stored_invoice):
        stored_invoice.paid_amount = Decimal("140.4")

        result = await update_invoice_use_case.execute(
            UpdateInvoiceCommandDTO(invoice_id="inv-1", status=InvoiceStatus.SENT)
        )

        assert result.value.status == InvoiceStatus.SENT
