"""GetPaymentStatus Use Case"""

from datetime import datetime
from typing import Optional
from libs.result import Result, Return
from src.app.repositories.transaction_repository import TransactionRepository
from src.domain.analytics import PaymentStatusData, get_payment_status_data


class GetPaymentStatus:
    """Use case: collected vs pending, optionally within a date range (inclusive)"""

    def __init__(self, transaction_repo: TransactionRepository):
        self.transaction_repo = transaction_repo

    async def execute(
        self,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None,
    ) -> Result[PaymentStatusData]:
        transactions = await self.transaction_repo.get_all()
        return Return.ok(get_payment_status_data(transactions, start_date, end_date))
