from .unit_of_work import SqlAlchemyUnitOfWork
from .notification_service import (
    LoggingInvoiceNotifier,
    WebhookInvoiceNotifier,
    create_invoice_notifier,
)
from .pdf_service import ReportLabPdfService

__all__ = [
    "SqlAlchemyUnitOfWork",
    "LoggingInvoiceNotifier",
    "WebhookInvoiceNotifier",
    "create_invoice_notifier",
    "ReportLabPdfService",
]
