"""Data Transfer Objects for Invoicing Use Cases

Pydantic models for command inputs and response outputs.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional, List
from pydantic import Field
from src.app.use_cases.dto_base import CamelModel
from src.domain.invoice import Invoice, InvoiceStatus
from src.domain.payment import Payment


class CreateInvoiceCommandDTO(CamelModel):
    """
    Command DTO for creating an invoice

    Missing labor hours, hourly rate and material cost count as 0;
    a missing tax rate falls back to the configured default.
    """

    account_id: str = Field(..., description="Owning account ID")
    job_id: str = Field(..., description="Job being billed")
    customer_id: str = Field(..., description="Customer being billed")
    labor_hours: Optional[Decimal] = Field(default=None, description="Hours of labor")
    hourly_rate: Optional[Decimal] = Field(default=None, description="Labor rate per hour")
    material_cost: Optional[Decimal] = Field(default=None, description="Material cost")
    tax_rate: Optional[Decimal] = Field(default=None, description="Tax rate as a fraction (0.08 = 8%)")
    due_date: Optional[datetime] = Field(default=None, description="Defaults to invoice date + due days")
    notes: Optional[str] = Field(default=None)


class UpdateInvoiceCommandDTO(CamelModel):
    """
    Command DTO for a partial invoice update

    Unset fields keep their stored value. Amounts are recomputed regardless.
    """

    invoice_id: str
    status: Optional[InvoiceStatus] = Field(default=None)
    labor_hours: Optional[Decimal] = Field(default=None)
    material_cost: Optional[Decimal] = Field(default=None)


class InvoiceResponseDTO(CamelModel):
    """Response DTO for invoice operations"""

    id: str
    invoice_number: str
    account_id: str
    job_id: str
    customer_id: str
    labor_hours: Optional[Decimal] = None
    hourly_rate: Optional[Decimal] = None
    labor_amount: Decimal
    material_cost: Decimal
    subtotal: Decimal
    tax_rate: Decimal
    tax_amount: Decimal
    total_amount: Decimal
    paid_amount: Decimal
    status: InvoiceStatus
    invoice_date: datetime
    due_date: datetime
    sent_date: Optional[datetime] = None
    payment_date: Optional[datetime] = None
    notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        json_schema_extra = {
            "example": {
                "id": "6f1c2a9e-4b1d-4f7e-9a53-1c2b3d4e5f60",
                "invoiceNumber": "INV-2024-000001",
                "accountId": "0b7d9c1e-2f3a-4b5c-8d9e-0f1a2b3c4d5e",
                "jobId": "9e8d7c6b-5a49-4837-a625-14f3e2d1c0b9",
                "customerId": "1a2b3c4d-5e6f-4a7b-8c9d-0e1f2a3b4c5d",
                "laborHours": "2.000000",
                "hourlyRate": "50.000000",
                "laborAmount": "100.000000",
                "materialCost": "30.000000",
                "subtotal": "130.000000",
                "taxRate": "0.080000",
                "taxAmount": "10.400000",
                "totalAmount": "140.400000",
                "paidAmount": "0.000000",
                "status": "draft",
                "invoiceDate": "2024-01-01T00:00:00Z",
                "dueDate": "2024-01-31T00:00:00Z",
                "sentDate": None,
                "paymentDate": None,
                "notes": None,
                "createdAt": "2024-01-01T00:00:00Z",
                "updatedAt": "2024-01-01T00:00:00Z"
            }
        }

    @classmethod
    def from_entity(cls, invoice: Invoice) -> "InvoiceResponseDTO":
        return cls(
            id=invoice.id,
            invoice_number=invoice.invoice_number,
            account_id=invoice.account_id,
            job_id=invoice.job_id,
            customer_id=invoice.customer_id,
            labor_hours=invoice.labor_hours,
            hourly_rate=invoice.hourly_rate,
            labor_amount=invoice.labor_amount,
            material_cost=invoice.material_cost,
            subtotal=invoice.subtotal,
            tax_rate=invoice.tax_rate,
            tax_amount=invoice.tax_amount,
            total_amount=invoice.total_amount,
            paid_amount=invoice.paid_amount,
            status=invoice.status,
            invoice_date=invoice.invoice_date,
            due_date=invoice.due_date,
            sent_date=invoice.sent_date,
            payment_date=invoice.payment_date,
            notes=invoice.notes,
            created_at=invoice.created_at,
            updated_at=invoice.updated_at,
        )


class RecordPaymentCommandDTO(CamelModel):
    """
    Command DTO for applying a payment to an invoice

    A reference number is generated when none is supplied.
    """

    invoice_id: str
    amount: Decimal = Field(..., gt=0, description="Amount received (must be > 0)")
    payment_method: Optional[str] = Field(default=None, description="cash, check, card, ach, other")
    reference_number: Optional[str] = Field(default=None)
    notes: Optional[str] = Field(default=None)


class PaymentResponseDTO(CamelModel):
    """
    Response DTO for payment operations

    invoice_status and invoice_paid_amount describe the invoice right after
    the payment was applied; they are omitted when reading a stored payment.
    """

    id: str
    invoice_id: str
    customer_id: str
    account_id: str
    amount: Decimal
    payment_method: Optional[str] = None
    reference_number: Optional[str] = None
    payment_date: datetime
    notes: Optional[str] = None
    created_at: datetime
    invoice_status: Optional[InvoiceStatus] = None
    invoice_paid_amount: Optional[Decimal] = None

    @classmethod
    def from_entity(
        cls, payment: Payment, invoice: Optional[Invoice] = None
    ) -> "PaymentResponseDTO":
        return cls(
            id=payment.id,
            invoice_id=payment.invoice_id,
            customer_id=payment.customer_id,
            account_id=payment.account_id,
            amount=payment.amount,
            payment_method=payment.payment_method,
            reference_number=payment.reference_number,
            payment_date=payment.payment_date,
            notes=payment.notes,
            created_at=payment.created_at,
            invoice_status=invoice.status if invoice else None,
            invoice_paid_amount=invoice.paid_amount if invoice else None,
        )


class BillingSummaryDTO(CamelModel):
    """Response DTO for the invoicing/collections summary"""

    total_invoices: int
    total_invoiced: Decimal
    total_collected: Decimal
    total_outstanding: Decimal
    paid_invoices: int
    unpaid_invoices: int
    collection_rate: Decimal = Field(..., description="Collected / invoiced * 100")
    total_payments: int
    average_payment: Decimal


class EmailInvoiceCommandDTO(CamelModel):
    """Command DTO for delivering an invoice to a customer"""

    invoice_id: str
    recipient_email: str
    recipient_name: str


class InvoicePdfDTO(CamelModel):
    """Rendered invoice document"""

    invoice_number: str
    content: bytes


class MarkOverdueResultDTO(CamelModel):
    """Result of an overdue sweep"""

    checked: int
    marked_overdue: int
    invoice_ids: List[str] = Field(default_factory=list)
