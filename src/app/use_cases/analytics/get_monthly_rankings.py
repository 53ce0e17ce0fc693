"""GetMonthlyRankings Use Case"""

from datetime import datetime
from typing import Callable, List, Optional
from libs.result import Result, Return, Error
from src.app.repositories.customer_repository import CustomerRepository
from src.app.repositories.transaction_repository import TransactionRepository
from src.domain.analytics import RankedCustomer, get_monthly_rankings
from src.domain.base import utc_now


class GetMonthlyRankings:
    """
    Use case: Customers ranked by sales in one calendar month

    month is 1-12; month and year default to the current ones.
    """

    def __init__(
        self,
        customer_repo: CustomerRepository,
        transaction_repo: TransactionRepository,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.customer_repo = customer_repo
        self.transaction_repo = transaction_repo
        self.clock = clock

    async def execute(
        self, month: Optional[int] = None, year: Optional[int] = None
    ) -> Result[List[RankedCustomer]]:
        if month is not None and not 1 <= month <= 12:
            return Return.err(
                Error(code="INVALID_PERIOD", message=f"Month must be between 1 and 12, got {month}")
            )

        customers = await self.customer_repo.get_all()
        transactions = await self.transaction_repo.get_all()
        return Return.ok(
            get_monthly_rankings(customers, transactions, month=month, year=year, now=self.clock())
        )
