"""GetDashboardStats Use Case"""

from datetime import datetime
from typing import Callable
from libs.result import Result, Return
from src.app.repositories.customer_repository import CustomerRepository
from src.app.repositories.transaction_repository import TransactionRepository
from src.domain.analytics import DashboardStats, get_dashboard_stats
from src.domain.base import utc_now


class GetDashboardStats:
    """
    Use case: Home screen headline numbers

    Recomputed from a fresh snapshot of customers and transactions on
    every call; nothing is cached.
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

    async def execute(self) -> Result[DashboardStats]:
        customers = await self.customer_repo.get_all()
        transactions = await self.transaction_repo.get_all()
        return Return.ok(get_dashboard_stats(customers, transactions, now=self.clock()))
