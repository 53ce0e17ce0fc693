"""ListCustomerPayments Use Case"""

from typing import List
from libs.result import Result, Return
from src.app.repositories.payment_repository import PaymentRepository
from src.domain.payment import Payment


class ListCustomerPayments:
    """Use case: payments recorded for a customer, newest first"""

    def __init__(self, payment_repo: PaymentRepository):
        self.payment_repo = payment_repo

    async def execute(self, customer_id: str) -> Result[List[Payment]]:
        return Return.ok(await self.payment_repo.get_by_customer_id(customer_id))
