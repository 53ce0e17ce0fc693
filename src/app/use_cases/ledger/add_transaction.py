"""AddTransaction Use Case

Records a sale and prepends it to the transactions collection.
"""

import logging
from datetime import datetime
from typing import Callable
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.transaction_repository import TransactionRepository
from src.domain.base import generate_uuid, utc_now
from src.domain.transaction import Transaction, derive_status
from .dtos import CreateTransactionCommandDTO

logger = logging.getLogger(__name__)


class AddTransaction:
    """
    Use Case: Record a sale

    Business Rules:
    1. A new id is generated and created_at is set to now
    2. A caller-supplied status is stored as given; otherwise it is derived
       from total_amount and amount_paid
    3. The customer reference is not validated
    """

    def __init__(
        self,
        uow: UnitOfWork,
        transaction_repo: TransactionRepository,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.uow = uow
        self.transaction_repo = transaction_repo
        self.clock = clock

    async def execute(self, command: CreateTransactionCommandDTO) -> Result[Transaction]:
        try:
            status = command.status or derive_status(command.total_amount, command.amount_paid)
            transaction = Transaction(
                id=generate_uuid(),
                customer_id=command.customer_id,
                date=command.date,
                products=command.products,
                total_amount=command.total_amount,
                amount_paid=command.amount_paid,
                status=status,
                notes=command.notes,
                created_at=self.clock(),
            )

            transactions = await self.transaction_repo.get_all()
            transactions.insert(0, transaction)
            await self.transaction_repo.save_all(transactions)
            await self.uow.commit()

            logger.info(
                f"Added transaction {transaction.id} for customer {transaction.customer_id} "
                f"(total={transaction.total_amount}, paid={transaction.amount_paid}, status={status.value})"
            )
            return Return.ok(transaction)

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to add transaction: {e}")
            return Return.err(
                Error(
                    code="SAVE_FAILED",
                    message="Failed to save transaction",
                    reason=str(e),
                )
            )
