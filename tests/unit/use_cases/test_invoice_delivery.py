"""Unit tests for invoice read, send, delete, PDF and e-mail use cases"""

import pytest
from datetime import datetime
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

from src.app.services.notification_service import InvoiceDeliveryError
from src.app.use_cases.invoicing import (
    GetInvoice,
    ListInvoices,
    SendInvoice,
    DeleteInvoice,
    RenderInvoicePdf,
    EmailInvoice,
    EmailInvoiceCommandDTO,
)
from src.domain.invoice import Invoice, InvoiceStatus


@pytest.fixture
def sample_invoice():
    invoice = Invoice(
        id="inv-1",
        account_id="acct-1",
        job_id="job-1",
        customer_id="cust-1",
        invoice_number="INV-2024-000007",
        labor_hours=Decimal("2"),
        hourly_rate=Decimal("50"),
        material_cost=Decimal("30"),
        tax_rate=Decimal("0.08"),
        status=InvoiceStatus.DRAFT,
        invoice_date=datetime(2024, 1, 1),
        created_at=datetime(2024, 1, 1),
        updated_at=datetime(2024, 1, 1),
    )
    invoice.recalculate()
    return invoice


@pytest.fixture
def mock_invoice_repo(sample_invoice):
    repo = MagicMock()
    repo.get_by_id = AsyncMock(return_value=sample_invoice)
    repo.list = AsyncMock(return_value=[sample_invoice])

    async def echo(invoice):
        return invoice

    repo.update = AsyncMock(side_effect=echo)
    repo.delete = AsyncMock()
    return repo


@pytest.mark.asyncio
class TestGetAndListInvoices:
    async def test_get_invoice(self, mock_invoice_repo):
        result = await GetInvoice(mock_invoice_repo).execute("inv-1")

        assert result.is_ok()
        assert result.value.invoice_number == "INV-2024-000007"
        assert result.value.total_amount == Decimal("140.4")

    async def test_get_missing_invoice(self, mock_invoice_repo):
        mock_invoice_repo.get_by_id = AsyncMock(return_value=None)

        result = await GetInvoice(mock_invoice_repo).execute("missing")

        assert result.error.code == "INVOICE_NOT_FOUND"

    async def test_list_passes_filters(self, mock_invoice_repo):
        result = await ListInvoices(mock_invoice_repo).execute(
            account_id="acct-1", status=InvoiceStatus.DRAFT, limit=10, offset=5
        )

        assert len(result.value) == 1
        mock_invoice_repo.list.assert_called_once_with(
            account_id="acct-1", status=InvoiceStatus.DRAFT, limit=10, offset=5
        )


@pytest.mark.asyncio
class TestSendInvoice:
    async def test_send_sets_status_and_date(self, mock_uow, mock_invoice_repo):
        result = await SendInvoice(mock_uow, mock_invoice_repo).execute("inv-1")

        assert result.is_ok()
        assert result.value.status == InvoiceStatus.SENT
        assert result.value.sent_date is not None
        assert result.value.total_amount == Decimal("140.4")
        mock_uow.commit.assert_called_once()

    async def test_send_missing_invoice(self, mock_uow, mock_invoice_repo):
        mock_invoice_repo.get_by_id = AsyncMock(return_value=None)

        result = await SendInvoice(mock_uow, mock_invoice_repo).execute("missing")

        assert result.error.code == "INVOICE_NOT_FOUND"
        mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
class TestDeleteInvoice:
    async def test_delete(self, mock_uow, mock_invoice_repo, sample_invoice):
        result = await DeleteInvoice(mock_uow, mock_invoice_repo).execute("inv-1")

        assert result.is_ok()
        mock_invoice_repo.delete.assert_called_once_with(sample_invoice)
        mock_uow.commit.assert_called_once()

    async def test_delete_missing_invoice(self, mock_uow, mock_invoice_repo):
        mock_invoice_repo.get_by_id = AsyncMock(return_value=None)

        result = await DeleteInvoice(mock_uow, mock_invoice_repo).execute("missing")

        assert result.error.code == "INVOICE_NOT_FOUND"
        mock_invoice_repo.delete.assert_not_called()


@pytest.mark.asyncio
class TestRenderInvoicePdf:
    async def test_render(self, mock_invoice_repo, sample_invoice):
        # Arrange
        pdf_service = MagicMock()
        pdf_service.generate_invoice_pdf.return_value = b"%PDF-1.4 fake"

        # Act
        result = await RenderInvoicePdf(mock_invoice_repo, pdf_service).execute("inv-1")

        # Assert
        assert result.is_ok()
        assert result.value.invoice_number == "INV-2024-000007"
        assert result.value.content == b"%PDF-1.4 fake"
        pdf_service.generate_invoice_pdf.assert_called_once_with(sample_invoice)

    async def test_render_failure(self, mock_invoice_repo):
        pdf_service = MagicMock()
        pdf_service.generate_invoice_pdf.side_effect = RuntimeError("font missing")

        result = await RenderInvoicePdf(mock_invoice_repo, pdf_service).execute("inv-1")

        assert result.error.code == "RENDER_INVOICE_PDF_FAILED"


@pytest.mark.asyncio
class TestEmailInvoice:
    @pytest.fixture
    def notifier(self):
        notifier = MagicMock()
        notifier.send_invoice = AsyncMock()
        return notifier

    async def test_email_sends_and_marks_sent(self, mock_uow, mock_invoice_repo, notifier, sample_invoice):
        # Act
        result = await EmailInvoice(mock_uow, mock_invoice_repo, notifier).execute(
            EmailInvoiceCommandDTO(
                invoice_id="inv-1", recipient_email="pat@example.com", recipient_name="Pat"
            )
        )

        # Assert
        assert result.is_ok()
        assert result.value.message == "Invoice sent successfully"
        notifier.send_invoice.assert_called_once_with(
            recipient_email="pat@example.com",
            recipient_name="Pat",
            invoice_number="INV-2024-000007",
            total_amount=sample_invoice.total_amount,
        )
        assert sample_invoice.status == InvoiceStatus.SENT
        mock_uow.commit.assert_called_once()

    async def test_empty_email_is_rejected(self, mock_uow, mock_invoice_repo, notifier):
        result = await EmailInvoice(mock_uow, mock_invoice_repo, notifier).execute(
            EmailInvoiceCommandDTO(invoice_id="inv-1", recipient_email=" ", recipient_name="Pat")
        )

        assert result.error.code == "VALIDATION_ERROR"
        notifier.send_invoice.assert_not_called()

    async def test_delivery_failure_leaves_invoice_unsent(
        self, mock_uow, mock_invoice_repo, notifier, sample_invoice
    ):
        notifier.send_invoice = AsyncMock(side_effect=InvoiceDeliveryError("webhook returned 502"))

        result = await EmailInvoice(mock_uow, mock_invoice_repo, notifier).execute(
            EmailInvoiceCommandDTO(
                invoice_id="inv-1", recipient_email="pat@example.com", recipient_name="Pat"
            )
        )

        assert result.error.code == "INVOICE_DELIVERY_FAILED"
        assert sample_invoice.status == InvoiceStatus.DRAFT
        mock_uow.commit.assert_not_called()
