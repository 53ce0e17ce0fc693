"""Transaction Repository Interface

Defines the contract for the transactions collection.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from src.domain.transaction import Transaction


class TransactionRepository(ABC):
    """
    Repository interface for the transactions collection

    Whole-collection get/save; reads degrade to an empty list.
    """

    @abstractmethod
    async def get_all(self) -> List[Transaction]:
        """
        Retrieve every transaction, newest first

        Returns:
            List of transactions (empty on missing or corrupt data)
        """
        pass

    @abstractmethod
    async def save_all(self, transactions: List[Transaction]) -> None:
        """
        Overwrite the whole transactions collection

        Args:
            transactions: Complete collection to persist
        """
        pass

    async def get_by_id(self, transaction_id: str) -> Optional[Transaction]:
        transactions = await self.get_all()
        return next((t for t in transactions if t.id == transaction_id), None)

    async def get_by_customer_id(self, customer_id: str) -> List[Transaction]:
        """Transactions belonging to one customer, in collection order"""
        transactions = await self.get_all()
        return [t for t in transactions if t.customer_id == customer_id]
