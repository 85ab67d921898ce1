"""Request schemas for Invoice and Payment APIs

Field names are camelCase on the wire; snake_case is also accepted.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from pydantic import Field

from src.app.use_cases.dto_base import CamelModel
from src.domain.invoice import InvoiceStatus


class CreateInvoiceRequestSchema(CamelModel):
    """
    Request schema for creating an invoice

    Used for POST /invoices. accountId falls back to the caller's account.
    """

    account_id: Optional[str] = Field(default=None, description="Defaults to the X-Account-Id header")
    job_id: str = Field(..., min_length=1)
    customer_id: str = Field(..., min_length=1)
    labor_hours: Optional[Decimal] = Field(default=None)
    hourly_rate: Optional[Decimal] = Field(default=None)
    material_cost: Optional[Decimal] = Field(default=None)
    tax_rate: Optional[Decimal] = Field(default=None, description="Fraction, e.g. 0.08")
    due_date: Optional[datetime] = Field(default=None)
    notes: Optional[str] = Field(default=None)


class UpdateInvoiceRequestSchema(CamelModel):
    """Used for PUT /invoices/{id}. Unset fields are left unchanged."""

    status: Optional[InvoiceStatus] = Field(default=None)
    labor_hours: Optional[Decimal] = Field(default=None)
    material_cost: Optional[Decimal] = Field(default=None)


class RecordPaymentRequestSchema(CamelModel):
    """Used for POST /invoices/{id}/payment"""

    amount: Decimal = Field(..., gt=0, description="Amount received (must be > 0)")
    payment_method: Optional[str] = Field(default=None)
    reference_number: Optional[str] = Field(default=None)
    notes: Optional[str] = Field(default=None)


class CreatePaymentRequestSchema(RecordPaymentRequestSchema):
    """Used for POST /invoices-payments/payments"""

    invoice_id: str = Field(..., min_length=1)


class EmailInvoiceRequestSchema(CamelModel):
    """Used for POST /invoices/{id}/email"""

    recipient_email: str = Field(..., description="Customer email address")
    recipient_name: str = Field(default="Customer")
