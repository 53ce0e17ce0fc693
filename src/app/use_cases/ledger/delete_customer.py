"""DeleteCustomer Use Case

Removes a customer together with its transactions and payments.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.customer_repository import CustomerRepository
from src.app.repositories.transaction_repository import TransactionRepository
from src.app.repositories.payment_repository import PaymentRepository

logger = logging.getLogger(__name__)


class DeleteCustomer:
    """
    Use Case: Delete a customer (cascading)

    Business Rules:
    1. Every transaction and payment with the customer's id is removed
    2. All three collections are committed together
    3. Deleting an unknown id is a no-op, not an error
    """

    def __init__(
        self,
        uow: UnitOfWork,
        customer_repo: CustomerRepository,
        transaction_repo: TransactionRepository,
        payment_repo: PaymentRepository,
    ):
        self.uow = uow
        self.customer_repo = customer_repo
        self.transaction_repo = transaction_repo
        self.payment_repo = payment_repo

    async def execute(self, customer_id: str) -> Result[None]:
        try:
            customers = await self.customer_repo.get_all()
            remaining_customers = [c for c in customers if c.id != customer_id]
            await self.customer_repo.save_all(remaining_customers)

            transactions = await self.transaction_repo.get_all()
            remaining_transactions = [t for t in transactions if t.customer_id != customer_id]
            await self.transaction_repo.save_all(remaining_transactions)

            payments = await self.payment_repo.get_all()
            remaining_payments = [p for p in payments if p.customer_id != customer_id]
            await self.payment_repo.save_all(remaining_payments)

            await self.uow.commit()

            logger.info(
                f"Deleted customer {customer_id}: "
                f"{len(customers) - len(remaining_customers)} customer(s), "
                f"{len(transactions) - len(remaining_transactions)} transaction(s), "
                f"{len(payments) - len(remaining_payments)} payment(s)"
            )
            return Return.ok(None)

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to delete customer {customer_id}: {e}")
            return Return.err(
                Error(
                    code="SAVE_FAILED",
                    message="Failed to delete customer",
                    reason=str(e),
                )
            )
