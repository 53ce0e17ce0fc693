"""Payment Repository Interface

Defines the contract for the payments collection.
"""

from abc import ABC, abstractmethod
from typing import List
from src.domain.payment import Payment


class PaymentRepository(ABC):
    """
    Repository interface for the payments collection

    Payments are append-only; the collection is still saved as a whole.
    """

    @abstractmethod
    async def get_all(self) -> List[Payment]:
        """
        Retrieve every payment, newest first

        Returns:
            List of payments (empty on missing or corrupt data)
        """
        pass

    @abstractmethod
    async def save_all(self, payments: List[Payment]) -> None:
        """
        Overwrite the whole payments collection

        Args:
            payments: Complete collection to persist
        """
        pass

    async def get_by_customer_id(self, customer_id: str) -> List[Payment]:
        payments = await self.get_all()
        return [p for p in payments if p.customer_id == customer_id]

    async def get_by_transaction_id(self, transaction_id: str) -> List[Payment]:
        payments = await self.get_all()
        return [p for p in payments if p.transaction_id == transaction_id]
