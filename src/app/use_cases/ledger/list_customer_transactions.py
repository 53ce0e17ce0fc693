"""ListCustomerTransactions Use Case"""

from typing import List
from libs.result import Result, Return
from src.app.repositories.transaction_repository import TransactionRepository
from src.domain.transaction import Transaction


class ListCustomerTransactions:
    """
    Use case: a customer's transactions

    An unknown (or deleted) customer simply has no transactions.
    """

    def __init__(self, transaction_repo: TransactionRepository):
        self.transaction_repo = transaction_repo

    async def execute(self, customer_id: str) -> Result[List[Transaction]]:
        return Return.ok(await self.transaction_repo.get_by_customer_id(customer_id))
