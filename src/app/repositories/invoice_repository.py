"""Invoice Repository Interface

Defines the contract for invoice persistence operations.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from decimal import Decimal
from typing import Optional, List
from src.domain.invoice import Invoice, InvoiceStatus


class InvoiceNumberTaken(Exception):
    """Raised by create when another invoice already holds the number"""

    def __init__(self, invoice_number: str):
        super().__init__(f"Invoice number {invoice_number} is already taken")
        self.invoice_number = invoice_number


class InvoiceRepository(ABC):
    """
    Repository interface for Invoice persistence

    Provides access to invoice data for billing operations.
    """

    @abstractmethod
    async def create(self, invoice: Invoice) -> Invoice:
        """
        Create a new invoice

        Args:
            invoice: Invoice entity to persist

        Returns:
            Created Invoice

        Raises:
            InvoiceNumberTaken: invoice_number collides with a stored invoice
        """
        pass

    @abstractmethod
    async def get_by_id(self, invoice_id: str, for_update: bool = False) -> Optional[Invoice]:
        """
        Retrieve invoice by ID

        Args:
            invoice_id: Invoice ID
            for_update: If True, locks the row until the transaction ends

        Returns:
            Invoice if found, None otherwise
        """
        pass

    @abstractmethod
    async def list(
        self,
        account_id: Optional[str] = None,
        status: Optional[InvoiceStatus] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> List[Invoice]:
        """
        Retrieve invoices, newest invoice_date first

        Args:
            account_id: Optional filter by account
            status: Optional filter by status
            limit: Maximum number of invoices to return
            offset: Offset for pagination

        Returns:
            List of invoices
        """
        pass

    @abstractmethod
    async def list_all(self, account_id: Optional[str] = None) -> List[Invoice]:
        """Retrieve every invoice (optionally for one account) for aggregation"""
        pass

    @abstractmethod
    async def get_first_for_job(self, job_id: str) -> Optional[Invoice]:
        """
        Retrieve the earliest created invoice for a job

        Args:
            job_id: Job ID

        Returns:
            Invoice if the job has been invoiced, None otherwise
        """
        pass

    @abstractmethod
    async def list_overdue_candidates(self, as_of: datetime) -> List[Invoice]:
        """Retrieve sent invoices whose due date is before as_of"""
        pass

    @abstractmethod
    async def update(self, invoice: Invoice) -> Invoice:
        """
        Update an existing invoice

        Args:
            invoice: Invoice entity with updated values

        Returns:
            Updated Invoice
        """
        pass

    @abstractmethod
    async def apply_payment(
        self, invoice_id: str, amount: Decimal, paid_at: datetime
    ) -> Optional[Invoice]:
        """
        Atomically add a payment amount to an invoice

        Increments paid_amount in a single UPDATE statement, then marks the
        invoice paid (setting payment_date) if paid_amount >= total_amount.

        Args:
            invoice_id: Invoice ID
            amount: Amount to add to paid_amount
            paid_at: Timestamp recorded as payment_date when the invoice settles

        Returns:
            The refreshed Invoice, None if it does not exist
        """
        pass

    @abstractmethod
    async def delete(self, invoice: Invoice) -> None:
        pass

    @abstractmethod
    async def generate_invoice_number(self) -> str:
        """
        Generate a unique invoice number

        Format: INV-YYYY-NNNNNN (e.g., INV-2024-000001)

        Returns:
            Unique invoice number string
        """
        pass
