"""Invoicing use cases"""
from .create_invoice import CreateInvoice
from .update_invoice import UpdateInvoice
from .get_invoice import GetInvoice, ListInvoices
from .delete_invoice import DeleteInvoice
from .send_invoice import SendInvoice
from .record_payment import RecordPayment
from .get_payment import GetPayment, ListPayments
from .get_billing_summary import GetBillingSummary
from .render_invoice_pdf import RenderInvoicePdf
from .email_invoice import EmailInvoice
from .mark_overdue_invoices import MarkOverdueInvoices
from .dtos import (
    CreateInvoiceCommandDTO,
    UpdateInvoiceCommandDTO,
    InvoiceResponseDTO,
    RecordPaymentCommandDTO,
    PaymentResponseDTO,
    BillingSummaryDTO,
    EmailInvoiceCommandDTO,
    InvoicePdfDTO,
    MarkOverdueResultDTO,
)

__all__ = [
    "CreateInvoice",
    "UpdateInvoice",
    "GetInvoice",
    "ListInvoices",
    "DeleteInvoice",
    "SendInvoice",
    "RecordPayment",
    "GetPayment",
    "ListPayments",
    "GetBillingSummary",
    "RenderInvoicePdf",
    "EmailInvoice",
    "MarkOverdueInvoices",
    "CreateInvoiceCommandDTO",
    "UpdateInvoiceCommandDTO",
    "InvoiceResponseDTO",
    "RecordPaymentCommandDTO",
    "PaymentResponseDTO",
    "BillingSummaryDTO",
    "EmailInvoiceCommandDTO",
    "InvoicePdfDTO",
    "MarkOverdueResultDTO",
]
