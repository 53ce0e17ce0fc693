"""Customer Repository Interface

Defines the contract for the customers collection.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from src.domain.customer import Customer


class CustomerRepository(ABC):
    """
    Repository interface for the customers collection

    The collection is read and written as a whole. Reads never raise:
    missing or unreadable data yields an empty list.
    """

    @abstractmethod
    async def get_all(self) -> List[Customer]:
        """
        Retrieve every customer, newest first

        Returns:
            List of customers (empty on missing or corrupt data)
        """
        pass

    @abstractmethod
    async def save_all(self, customers: List[Customer]) -> None:
        """
        Overwrite the whole customers collection

        Args:
            customers: Complete collection to persist

        Raises:
            Exception: Propagates storage failures to the caller
        """
        pass

    async def get_by_id(self, customer_id: str) -> Optional[Customer]:
        customers = await self.get_all()
        return next((c for c in customers if c.id == customer_id), None)
