from .unit_of_work import UnitOfWork
from .notification_service import InvoiceNotifier, InvoiceDeliveryError
from .pdf_service import PdfService

__all__ = [
    "UnitOfWork",
    "InvoiceNotifier",
    "InvoiceDeliveryError",
    "PdfService",
]
