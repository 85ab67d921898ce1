"""Payment Repository Interface

Defines the contract for payment persistence operations.
"""

from abc import ABC, abstractmethod
from typing import Optional, List
from src.domain.payment import Payment


class PaymentRepository(ABC):
    """Repository interface for Payment persistence (append-only)"""

    @abstractmethod
    async def create(self, payment: Payment) -> Payment:
        pass

    @abstractmethod
    async def get_by_id(self, payment_id: str) -> Optional[Payment]:
        pass

    @abstractmethod
    async def list(
        self,
        account_id: Optional[str] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> List[Payment]:
        """
        Retrieve payments, newest payment_date first

        Args:
            account_id: Optional filter by account
            limit: Maximum number of payments to return
            offset: Offset for pagination
        """
        pass

    @abstractmethod
    async def list_all(self, account_id: Optional[str] = None) -> List[Payment]:
        pass

    @abstractmethod
    async def list_by_invoice(self, invoice_id: str) -> List[Payment]:
        pass
