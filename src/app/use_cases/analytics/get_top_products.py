"""GetTopProducts Use Case"""

from datetime import datetime
from typing import List, Optional
from libs.result import Result, Return
from src.app.repositories.transaction_repository import TransactionRepository
from src.domain.analytics import ProductSales, get_top_products


class GetTopProducts:
    """Use case: best-selling products by revenue"""

    def __init__(self, transaction_repo: TransactionRepository):
        self.transaction_repo = transaction_repo

    async def execute(
        self,
        limit: int = 5,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None,
    ) -> Result[List[ProductSales]]:
        transactions = await self.transaction_repo.get_all()
        return Return.ok(get_top_products(transactions, limit, start_date, end_date))
