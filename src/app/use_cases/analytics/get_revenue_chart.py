"""GetRevenueChart Use Case"""

from datetime import datetime
from typing import Callable, Optional
from libs.result import Result, Return, Error
from src.app.repositories.transaction_repository import TransactionRepository
from src.domain.analytics import RevenueChartData, get_revenue_chart_data
from src.domain.base import utc_now


class GetRevenueChart:
    """Use case: monthly revenue series ending at the current month"""

    def __init__(
        self,
        transaction_repo: TransactionRepository,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.transaction_repo = transaction_repo
        self.clock = clock

    async def execute(
        self,
        months: int = 6,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None,
    ) -> Result[RevenueChartData]:
        if months < 1:
            return Return.err(
                Error(code="INVALID_PERIOD", message=f"months must be at least 1, got {months}")
            )

        transactions = await self.transaction_repo.get_all()
        return Return.ok(
            get_revenue_chart_data(
                transactions,
                months=months,
                start_date=start_date,
                end_date=end_date,
                now=self.clock(),
            )
        )
