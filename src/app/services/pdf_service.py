"""PDF Generation Service Interface

Defines the contract for PDF generation operations.
"""

from abc import ABC, abstractmethod
from src.domain.invoice import Invoice


class PdfService(ABC):
    """
    Service interface for PDF generation

    Renders a printable invoice document.
    """

    @abstractmethod
    def generate_invoice_pdf(self, invoice: Invoice) -> bytes:
        """
        Generate an invoice PDF

        Args:
            invoice: Invoice entity with billing details

        Returns:
            PDF document as bytes
        """
        pass
