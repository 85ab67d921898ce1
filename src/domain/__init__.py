from .base import BaseModel, generate_uuid
from .job import Job
from .invoice import Invoice, InvoiceStatus
from .payment import Payment
from .job_cost import JobCost, CostType

__all__ = [
    "BaseModel",
    "generate_uuid",
    "Job",
    "Invoice",
    "InvoiceStatus",
    "Payment",
    "JobCost",
    "CostType",
]
