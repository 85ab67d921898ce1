"""Billing Calculator

Pure functions deriving invoice amounts, applying payments and summarising
invoicing/collections. Nothing here touches persistence; callers pass in
values already loaded from the database.

Money columns hold 6 decimal places. Inputs and each derived product are
quantized to that scale with ROUND_HALF_UP before they are summed, so the
stored subtotal and total are exact sums of the stored parts.
"""

import uuid
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Optional, Tuple, Union

ZERO = Decimal("0")
DEFAULT_TAX_RATE = Decimal("0.08")
MONEY_SCALE = Decimal("0.000001")

Number = Union[Decimal, int, float, str]


def to_decimal(value: Optional[Number]) -> Decimal:
    """Coerce a nullable numeric input to Decimal (None counts as 0)"""
    if value is None:
        return ZERO
    if isinstance(value, Decimal):
        return value
    # str() keeps floats like 0.08 from turning into 0.0800000000000000016...
    return Decimal(str(value))


def quantize_amount(value: Optional[Number]) -> Decimal:
    """Round to the money column scale (6 places, half up)"""
    return to_decimal(value).quantize(MONEY_SCALE, rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class InvoiceAmounts:
    """Derived amount fields of an invoice"""
    labor_amount: Decimal
    subtotal: Decimal
    tax_amount: Decimal
    total_amount: Decimal


def calculate_invoice_amounts(
    labor_hours: Optional[Number],
    hourly_rate: Optional[Number],
    material_cost: Optional[Number],
    tax_rate: Optional[Number] = None,
) -> InvoiceAmounts:
    """
    Derive labor amount, subtotal, tax and total

        labor_amount = labor_hours * hourly_rate
        subtotal     = labor_amount + material_cost
        tax_amount   = subtotal * tax_rate
        total_amount = subtotal + tax_amount

    Missing hours, rate or material cost count as 0; a missing tax rate
    falls back to DEFAULT_TAX_RATE. Negative inputs and tax rates outside
    [0, 1] are accepted as given.

    labor_amount and tax_amount are rounded half up to MONEY_SCALE; subtotal
    and total_amount are sums of already rounded values and need no rounding.
    """
    rate = quantize_amount(DEFAULT_TAX_RATE if tax_rate is None else tax_rate)
    labor_amount = quantize_amount(quantize_amount(labor_hours) * quantize_amount(hourly_rate))
    subtotal = labor_amount + quantize_amount(material_cost)
    tax_amount = quantize_amount(subtotal * rate)
    return InvoiceAmounts(
        labor_amount=labor_amount,
        subtotal=subtotal,
        tax_amount=tax_amount,
        total_amount=subtotal + tax_amount,
    )


def apply_payment_amount(
    paid_amount: Optional[Number], total_amount: Number, amount: Number
) -> Tuple[Decimal, bool]:
    """
    Increment the paid amount by a payment

    Returns:
        (new_paid_amount, settled) where settled means new_paid_amount >= total_amount.
        Overpayment is accepted.
    """
    new_paid = to_decimal(paid_amount) + to_decimal(amount)
    return new_paid, new_paid >= to_decimal(total_amount)


def generate_payment_reference(now: Optional[datetime] = None) -> str:
    """Human-readable payment reference: PAY-YYYYMMDD-XXXXXX"""
    now = now or datetime.utcnow()
    return f"PAY-{now:%Y%m%d}-{uuid.uuid4().hex[:6].upper()}"


@dataclass(frozen=True)
class BillingSummary:
    total_invoices: int
    total_invoiced: Decimal
    total_collected: Decimal
    total_outstanding: Decimal
    paid_invoices: int
    unpaid_invoices: int
    collection_rate: Decimal
    total_payments: int
    average_payment: Decimal


def summarize_billing(invoices: Iterable, payments: Iterable) -> BillingSummary:
    """
    Aggregate invoicing and collection figures

    "Unpaid" counts invoices that are neither paid nor overdue; overdue
    invoices are tracked separately by their status.
    """
    invoices = list(invoices)
    payments = list(payments)

    total_invoiced = sum((to_decimal(i.total_amount) for i in invoices), ZERO)
    total_collected = sum((to_decimal(p.amount) for p in payments), ZERO)
    statuses = [_status_value(i.status) for i in invoices]

    return BillingSummary(
        total_invoices=len(invoices),
        total_invoiced=total_invoiced,
        total_collected=total_collected,
        total_outstanding=total_invoiced - total_collected,
        paid_invoices=sum(1 for s in statuses if s == "paid"),
        unpaid_invoices=sum(1 for s in statuses if s not in ("paid", "overdue")),
        collection_rate=(
            total_collected / total_invoiced * 100 if total_invoiced > 0 else ZERO
        ),
        total_payments=len(payments),
        average_payment=total_collected / len(payments) if payments else ZERO,
    )


def _status_value(status) -> str:
    return status.value if hasattr(status, "value") else str(status)
