"""Invoice Notification Service Interface

Defines the contract for delivering invoices to customers.
"""

from abc import ABC, abstractmethod
from decimal import Decimal


class InvoiceDeliveryError(Exception):
    """Raised when an invoice could not be delivered to the recipient"""
    pass


class InvoiceNotifier(ABC):
    """
    Abstract service for sending invoices to customers

    Implementations can deliver via:
    - Webhook (HTTP POST to a mail relay)
    - Logging (development)
    """

    @abstractmethod
    async def send_invoice(
        self,
        recipient_email: str,
        recipient_name: str,
        invoice_number: str,
        total_amount: Decimal,
    ) -> None:
        """
        Send an invoice notice to a customer

        Args:
            recipient_email: Customer e-mail address
            recipient_name: Customer display name
            invoice_number: Invoice number shown to the customer
            total_amount: Invoice total

        Raises:
            InvoiceDeliveryError: If delivery failed
        """
        pass
