"""Unit of Work Interface

Groups the collection writes of one use case into a single commit.
"""

from abc import ABC, abstractmethod


class UnitOfWork(ABC):
    """
    Transaction boundary spanning every collection

    Repositories only stage their writes; nothing is durable until commit().
    A use case that writes several collections (recording a payment, deleting
    a customer) therefore lands all of them or none of them.
    """

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        if exc_type is not None:
            await self.rollback()

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
