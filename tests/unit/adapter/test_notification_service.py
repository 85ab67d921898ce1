"""Unit tests for invoice notifier adapters"""

import json
import pytest
import httpx
from decimal import Decimal

from src.adapter.services.notification_service import (
    LoggingInvoiceNotifier,
    WebhookInvoiceNotifier,
    create_invoice_notifier,
)
from src.app.services.notification_service import InvoiceDeliveryError


class TestCreateInvoiceNotifier:
    def test_without_webhook_logs_only(self):
        assert isinstance(create_invoice_notifier(None), LoggingInvoiceNotifier)

    def test_with_webhook(self):
        notifier = create_invoice_notifier("https://mail.example.com/hook", sender_name="Ace Repairs")

        assert isinstance(notifier, WebhookInvoiceNotifier)
        assert notifier.sender_name == "Ace Repairs"


@pytest.mark.asyncio
class TestWebhookInvoiceNotifier:
    async def test_posts_invoice_notice(self):
        # Arrange
        captured = {}

        def handler(request: httpx.Request) -> httpx.Response:
            captured["url"] = str(request.url)
            captured["payload"] = json.loads(request.content)
            return httpx.Response(202)

        notifier = WebhookInvoiceNotifier(
            "https://mail.example.com/hook",
            sender_name="Ace Repairs",
            transport=httpx.MockTransport(handler),
        )

        # Act
        await notifier.send_invoice("pat@example.com", "Pat", "INV-2024-000001", Decimal("140.4"))

        # Assert
        assert captured["url"] == "https://mail.example.com/hook"
        payload = captured["payload"]
        assert payload["to"] == "pat@example.com"
        assert payload["subject"] == "Invoice INV-2024-000001 from Ace Repairs"
        assert payload["total_amount"] == "140.4"
        assert "Total Amount: $140.40" in payload["body"]

    async def test_error_status_raises_delivery_error(self):
        notifier = WebhookInvoiceNotifier(
            "https://mail.example.com/hook",
            transport=httpx.MockTransport(lambda request: httpx.Response(502)),
        )

        with pytest.raises(InvoiceDeliveryError):
            await notifier.send_invoice("pat@example.com", "Pat", "INV-2024-000001", Decimal("1"))

    async def test_logging_notifier_does_not_raise(self):
        await LoggingInvoiceNotifier().send_invoice(
            "pat@example.com", "Pat", "INV-2024-000001", Decimal("140.4")
        )
