from .invoice_repository import InvoiceRepository
from .payment_repository import PaymentRepository
from .job_cost_repository import JobCostRepository
from .job_repository import JobRepository

__all__ = [
    "InvoiceRepository",
    "PaymentRepository",
    "JobCostRepository",
    "JobRepository",
]
