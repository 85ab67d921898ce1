"""Unit tests for ReportLabPdfService"""

from datetime import datetime
from decimal import Decimal

from src.adapter.services.pdf_service import ReportLabPdfService
from src.domain.invoice import Invoice, InvoiceStatus


class TestReportLabPdfService:
    def test_generates_pdf_document(self):
        # Arrange
        invoice = Invoice(
            account_id="acct-1",
            job_id="job-1",
            customer_id="cust-1",
            invoice_number="INV-2024-000001",
            labor_hours=Decimal("2"),
            hourly_rate=Decimal("50"),
            material_cost=Decimal("30"),
            tax_rate=Decimal("0.08"),
            paid_amount=Decimal("60"),
            status=InvoiceStatus.SENT,
            invoice_date=datetime(2024, 1, 1),
            due_date=datetime(2024, 1, 31),
            notes="Thank you!",
        )
        invoice.recalculate()
        service = ReportLabPdfService(company_name="Ace Repairs", company_address="1 Main St")

        # Act
        pdf_bytes = service.generate_invoice_pdf(invoice)

        # Assert
        assert pdf_bytes.startswith(b"%PDF")
        assert len(pdf_bytes) > 1000
