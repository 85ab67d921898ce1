"""Invoice Domain Entity

Billable record combining labor and material costs, tax and payment
status for one job.
"""

from datetime import datetime, timedelta
from decimal import Decimal
from enum import Enum
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import Numeric, String, Text
from src.domain.base import BaseModel, generate_uuid
from src.domain.billing import (
    calculate_invoice_amounts,
    quantize_amount,
    to_decimal,
    DEFAULT_TAX_RATE,
)


class InvoiceStatus(str, Enum):
    """Invoice status types"""
    DRAFT = "draft"
    SENT = "sent"
    PAID = "paid"
    OVERDUE = "overdue"


class Invoice(BaseModel, table=True):
    """
    Invoice - Billing invoice for a job

    Domain Rules:
    - invoice_number must be unique
    - subtotal == labor_amount + material_cost and
      total_amount == subtotal + tax_amount after every mutation
    - paid_amount only grows, through recorded payments
    - Status becomes paid once paid_amount >= total_amount
    """

    __tablename__ = "invoices"
    __table_args__ = (
        Index('ix_invoices_account_id', 'account_id'),
        Index('ix_invoices_job_id', 'job_id'),
        Index('ix_invoices_status', 'status'),
        Index('ix_invoices_invoice_number', 'invoice_number', unique=True),
    )

    id: str = Field(
        default_factory=generate_uuid,
        sa_column=Column(String(36), primary_key=True),
        description="Unique invoice identifier (UUID)"
    )

    account_id: str = Field(
        sa_column=Column(String(36), nullable=False),
        description="Owning account ID"
    )

    job_id: str = Field(
        sa_column=Column(String(36), nullable=False),
        description="Job being billed"
    )

    customer_id: str = Field(
        sa_column=Column(String(36), nullable=False),
        description="Customer being billed"
    )

    invoice_number: str = Field(
        sa_column=Column(String(50), nullable=False, unique=True),
        description="Unique invoice number (e.g., INV-2024-000001)"
    )

    labor_hours: Optional[Decimal] = Field(
        default=None,
        sa_column=Column(Numeric(18, 6), nullable=True),
    )

    hourly_rate: Optional[Decimal] = Field(
        default=None,
        sa_column=Column(Numeric(18, 6), nullable=True),
    )

    labor_amount: Decimal = Field(
        default=Decimal("0"),
        sa_column=Column(Numeric(18, 6), nullable=False),
        description="labor_hours * hourly_rate"
    )

    material_cost: Decimal = Field(
        default=Decimal("0"),
        sa_column=Column(Numeric(18, 6), nullable=False),
    )

    subtotal: Decimal = Field(
        default=Decimal("0"),
        sa_column=Column(Numeric(18, 6), nullable=False),
        description="labor_amount + material_cost"
    )

    tax_rate: Decimal = Field(
        default=DEFAULT_TAX_RATE,
        sa_column=Column(Numeric(18, 6), nullable=False),
        description="Tax rate as a fraction (0.08 = 8%)"
    )

    tax_amount: Decimal = Field(
        default=Decimal("0"),
        sa_column=Column(Numeric(18, 6), nullable=False),
    )

    total_amount: Decimal = Field(
        default=Decimal("0"),
        sa_column=Column(Numeric(18, 6), nullable=False),
        description="subtotal + tax_amount"
    )

    paid_amount: Decimal = Field(
        default=Decimal("0"),
        sa_column=Column(Numeric(18, 6), nullable=False),
        description="Running sum of applied payments"
    )

    status: InvoiceStatus = Field(
        default=InvoiceStatus.DRAFT,
        description="Invoice status (draft, sent, paid, overdue)"
    )

    invoice_date: datetime = Field(default_factory=datetime.utcnow)

    due_date: datetime = Field(
        default_factory=lambda: datetime.utcnow() + timedelta(days=30)
    )

    sent_date: Optional[datetime] = Field(default=None)

    payment_date: Optional[datetime] = Field(
        default=None,
        description="Timestamp when the invoice became fully paid"
    )

    notes: Optional[str] = Field(
        default=None,
        sa_column=Column(Text, nullable=True),
    )

    created_at: datetime = Field(default_factory=datetime.utcnow)

    updated_at: datetime = Field(default_factory=datetime.utcnow)

    def recalculate(self) -> None:
        """Refresh derived amounts from labor hours, hourly rate, material cost and tax rate"""
        amounts = calculate_invoice_amounts(
            labor_hours=self.labor_hours,
            hourly_rate=self.hourly_rate,
            material_cost=self.material_cost,
            tax_rate=self.tax_rate,
        )
        # Keep inputs at column scale so a reload recomputes the same amounts
        if self.labor_hours is not None:
            self.labor_hours = quantize_amount(self.labor_hours)
        if self.hourly_rate is not None:
            self.hourly_rate = quantize_amount(self.hourly_rate)
        self.tax_rate = quantize_amount(
            DEFAULT_TAX_RATE if self.tax_rate is None else self.tax_rate
        )
        self.material_cost = quantize_amount(self.material_cost)
        self.labor_amount = amounts.labor_amount
        self.subtotal = amounts.subtotal
        self.tax_amount = amounts.tax_amount
        self.total_amount = amounts.total_amount

    def sync_payment_status(self, now: datetime) -> None:
        """
        Re-apply the settle rule after the total changed

        An invoice with payments becomes paid once they cover the total; a paid
        invoice whose total grew past the paid amount goes back to sent.
        """
        if self.status != InvoiceStatus.PAID:
            if to_decimal(self.paid_amount) > 0 and self.is_settled:
                self.status = InvoiceStatus.PAID
                self.payment_date = self.payment_date or now
        elif not self.is_settled:
            self.status = InvoiceStatus.SENT
            self.payment_date = None

    @property
    def balance_due(self) -> Decimal:
        return to_decimal(self.total_amount) - to_decimal(self.paid_amount)

    @property
    def is_settled(self) -> bool:
        return to_decimal(self.paid_amount) >= to_decimal(self.total_amount)
