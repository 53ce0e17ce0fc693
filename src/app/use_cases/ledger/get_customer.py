"""GetCustomer Use Case

Retrieves a customer with its transactions, payments and lifetime stats.
"""

from libs.result import Result, Return, Error
from src.app.repositories.customer_repository import CustomerRepository
from src.app.repositories.transaction_repository import TransactionRepository
from src.app.repositories.payment_repository import PaymentRepository
from src.domain.analytics import get_customer_stats
from .dtos import CustomerDetailDTO


class GetCustomer:
    """
    Use case: Customer detail

    Read-only. Returns CUSTOMER_NOT_FOUND for an unknown id.
    """

    def __init__(
        self,
        customer_repo: CustomerRepository,
        transaction_repo: TransactionRepository,
        payment_repo: PaymentRepository,
    ):
        self.customer_repo = customer_repo
        self.transaction_repo = transaction_repo
        self.payment_repo = payment_repo

    async def execute(self, customer_id: str) -> Result[CustomerDetailDTO]:
        customer = await self.customer_repo.get_by_id(customer_id)
        if not customer:
            return Return.err(
                Error(
                    code="CUSTOMER_NOT_FOUND",
                    message=f"Customer {customer_id} not found",
                )
            )

        transactions = await self.transaction_repo.get_by_customer_id(customer_id)
        payments = await self.payment_repo.get_by_customer_id(customer_id)

        return Return.ok(
            CustomerDetailDTO(
                customer=customer,
                transactions=transactions,
                payments=payments,
                stats=get_customer_stats(customer_id, transactions),
            )
        )
