"""Invoice Notifier Implementations

Provides concrete implementations for delivering invoices to customers.
"""

import logging
from decimal import Decimal
from typing import Optional
import httpx
from src.app.services.notification_service import InvoiceNotifier, InvoiceDeliveryError

logger = logging.getLogger(__name__)


class LoggingInvoiceNotifier(InvoiceNotifier):
    """
    Notifier that only logs the invoice notice

    Used in development and whenever no delivery webhook is configured.
    """

    async def send_invoice(
        self,
        recipient_email: str,
        recipient_name: str,
        invoice_number: str,
        total_amount: Decimal,
    ) -> None:
        logger.info(
            f"[INVOICE] To: {recipient_name} <{recipient_email}>, "
            f"Invoice: {invoice_number}, Total: ${total_amount:,.2f}"
        )


class WebhookInvoiceNotifier(InvoiceNotifier):
    """
    Notifier that posts the invoice notice to a mail relay webhook

    Sends a JSON payload with the rendered subject and body.
    """

    def __init__(
        self,
        webhook_url: str,
        sender_name: str = "HandimanApp",
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize webhook notifier

        Args:
            webhook_url: URL to POST invoice notices to
            sender_name: Business name used in the subject and signature
            timeout: Request timeout in seconds
            transport: Optional httpx transport (tests pass httpx.MockTransport)
        """
        self.webhook_url = webhook_url
        self.sender_name = sender_name
        self.timeout = timeout
        self.transport = transport

    def _render_body(self, recipient_name: str, invoice_number: str, total_amount: Decimal) -> str:
        return (
            f"Hello {recipient_name},\n\n"
            f"Thank you for your business. Please find your invoice details below:\n\n"
            f"Invoice Number: {invoice_number}\n"
            f"Total Amount: ${total_amount:,.2f}\n\n"
            f"Please reply to this email if you have any questions.\n\n"
            f"Best regards,\n"
            f"{self.sender_name}\n"
        )

    async def send_invoice(
        self,
        recipient_email: str,
        recipient_name: str,
        invoice_number: str,
        total_amount: Decimal,
    ) -> None:
        payload = {
            "type": "invoice",
            "to": recipient_email,
            "to_name": recipient_name,
            "subject": f"Invoice {invoice_number} from {self.sender_name}",
            "body": self._render_body(recipient_name, invoice_number, total_amount),
            "invoice_number": invoice_number,
            "total_amount": str(total_amount),
        }

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.post(
                    self.webhook_url,
                    json=payload,
                    headers={"Content-Type": "application/json"},
                )
                response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error(f"Failed to deliver invoice {invoice_number} to {recipient_email}: {e}")
            raise InvoiceDeliveryError(str(e)) from e

        logger.info(f"Invoice {invoice_number} delivered to {recipient_email} via {self.webhook_url}")


def create_invoice_notifier(
    webhook_url: Optional[str] = None, sender_name: str = "HandimanApp"
) -> InvoiceNotifier:
    """
    Factory function to create the appropriate notifier

    Args:
        webhook_url: Optional webhook URL. If provided, invoices are posted
                     there. Otherwise they are only logged.
        sender_name: Business name shown on the notice

    Returns:
        Configured InvoiceNotifier
    """
    if webhook_url:
        return WebhookInvoiceNotifier(webhook_url, sender_name=sender_name)
    return LoggingInvoiceNotifier()
