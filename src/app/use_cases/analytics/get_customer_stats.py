"""GetCustomerStats Use Case"""

from libs.result import Result, Return
from src.app.repositories.transaction_repository import TransactionRepository
from src.domain.analytics import CustomerStats, get_customer_stats


class GetCustomerStats:
    """Use case: lifetime totals and top products for one customer"""

    def __init__(self, transaction_repo: TransactionRepository):
        self.transaction_repo = transaction_repo

    async def execute(self, customer_id: str) -> Result[CustomerStats]:
        transactions = await self.transaction_repo.get_all()
        return Return.ok(get_customer_stats(customer_id, transactions))
