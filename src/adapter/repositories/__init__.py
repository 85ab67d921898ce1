from .invoice_repository import SqlAlchemyInvoiceRepository
from .payment_repository import SqlAlchemyPaymentRepository
from .job_cost_repository import SqlAlchemyJobCostRepository
from .job_repository import SqlAlchemyJobRepository

__all__ = [
    "SqlAlchemyInvoiceRepository",
    "SqlAlchemyPaymentRepository",
    "SqlAlchemyJobCostRepository",
    "SqlAlchemyJobRepository",
]
