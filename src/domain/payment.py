"""Payment Domain Entity

Append-only evidence of money received against an invoice.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import ForeignKey, Numeric, String, Text
from src.domain.base import BaseModel, generate_uuid


class Payment(BaseModel, table=True):
    """
    Payment - Monetary amount applied against an invoice

    Domain Rules:
    - Each payment belongs to exactly one invoice
    - Immutable once created (no update path)
    - reference_number is human-readable (PAY-YYYYMMDD-XXXXXX when generated)
    """

    __tablename__ = "payments"
    __table_args__ = (
        Index('ix_payments_invoice_id', 'invoice_id'),
        Index('ix_payments_account_id', 'account_id'),
    )

    id: str = Field(
        default_factory=generate_uuid,
        sa_column=Column(String(36), primary_key=True),
        description="Unique payment identifier (UUID)"
    )

    invoice_id: str = Field(
        sa_column=Column(String(36), ForeignKey("invoices.id", ondelete="CASCADE"), nullable=False),
        description="Foreign key to Invoice"
    )

    customer_id: str = Field(
        sa_column=Column(String(36), nullable=False),
    )

    account_id: str = Field(
        sa_column=Column(String(36), nullable=False),
    )

    amount: Decimal = Field(
        sa_column=Column(Numeric(18, 6), nullable=False),
        description="Amount received"
    )

    payment_method: Optional[str] = Field(
        default=None,
        sa_column=Column(String(30), nullable=True),
        description="cash, check, card, ach, other"
    )

    reference_number: Optional[str] = Field(
        default=None,
        sa_column=Column(String(100), nullable=True),
    )

    payment_date: datetime = Field(default_factory=datetime.utcnow)

    notes: Optional[str] = Field(
        default=None,
        sa_column=Column(Text, nullable=True),
    )

    created_at: datetime = Field(default_factory=datetime.utcnow)
