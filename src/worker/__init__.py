"""Background workers for the field service billing service"""
from .overdue_invoices import OverdueInvoiceWorker

__all__ = ["OverdueInvoiceWorker"]
